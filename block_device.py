import mmap
import os
import constants as C
from errors import AccessError, TruncatedImageError
from utils import debug_print


class BlockDevice:
    """
    只读的磁盘映像。整个映像只映射一次，之后所有读取都要经过边界检查
    """
    def __init__(self, path_to_image: str):
        self.path_to_image = path_to_image
        try:
            self.image_file = open(path_to_image, "rb")
        except OSError:
            raise AccessError()
        try:
            self.image_size = os.fstat(self.image_file.fileno()).st_size
            # 空文件无法mmap
            self.image = mmap.mmap(self.image_file.fileno(), 0, access=mmap.ACCESS_READ)
        except (OSError, ValueError):
            self.image_file.close()
            raise AccessError()
        self.block_count = self.image_size // C.BLOCK_BYTES
        debug_print(f"BlockDevice({path_to_image}): {self.image_size} bytes")

    def read_bytes(self, offset: int, length: int) -> bytes:
        if offset < 0 or length < 0 or offset + length > self.image_size:
            raise TruncatedImageError(offset, length, self.image_size)
        return self.image[offset:offset + length]

    def read_block_bytes(self, block_number: int, start: int, length: int) -> bytes:
        assert start + length <= C.BLOCK_BYTES, f"start: {start} + length: {length} > BLOCK_SIZE: {C.BLOCK_BYTES}"
        return self.read_bytes(block_number * C.BLOCK_BYTES + start, length)

    def read_block(self, block_number: int) -> bytes:
        return self.read_block_bytes(block_number, 0, C.BLOCK_BYTES)

    def close(self) -> None:
        self.image.close()
        self.image_file.close()

    def __enter__(self) -> "BlockDevice":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
