BAD_INODE = "bad inode."
BAD_DIRECT_ADDRESS = "bad direct address in inode."
BAD_INDIRECT_ADDRESS = "bad indirect address in inode."
ROOT_NOT_EXIST = "root directory does not exist."
DIR_NOT_FORMATTED = "directory not properly formatted."
ADDRESS_MARKED_FREE = "address used by inode but marked free in bitmap."
BITMAP_BLOCK_UNUSED = "bitmap marks block in use but it is not in use."
DIRECT_ADDRESS_REUSED = "direct address used more than once."
INDIRECT_ADDRESS_REUSED = "indirect address used more than once."
INODE_NOT_IN_DIRECTORY = "inode marked use but not found in a directory."
INODE_REFERRED_BUT_FREE = "inode referred to in directory but marked free."
BAD_FILE_REFERENCE_COUNT = "bad reference count for file."
DIRECTORY_REFERRED_TWICE = "directory appears more than once in file system."

USAGE = "Usage: fcheck <file_system_image>"


class FcheckError(Exception):
    """
    所有会导致fcheck以状态1退出的错误
    """
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def diagnostic(self) -> str:
        return self.message


class UsageError(FcheckError):
    def __init__(self, message: str = USAGE):
        super().__init__(message)


class AccessError(FcheckError):
    def __init__(self, message: str = "image not found"):
        super().__init__(message)


class TruncatedImageError(AccessError):
    def __init__(self, offset: int, length: int, image_size: int):
        super().__init__("image truncated")
        self.offset = offset
        self.length = length
        self.image_size = image_size


class StructuralError(FcheckError):
    """
    一致性检查失败。message是固定的几种错误信息之一
    """
    def diagnostic(self) -> str:
        return f"ERROR: {self.message}"
