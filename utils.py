import sys
from rich.console import Console
import constants as C

_console = Console(stderr=True, highlight=False, soft_wrap=True)

def debug_print(*args, **kwargs) -> None:
    if C.OUTPUT_LOG:
        _console.print("[dim]fcheck[/dim]", *args, **kwargs)

def error_print(message: str) -> None:
    # 错误信息要求逐字输出，不经过rich
    print(message, file=sys.stderr)

