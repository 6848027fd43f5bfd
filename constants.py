import os

# 盘块
BLOCK_BYTES = 512
BOOT_BLOCK_NO = 0
SUPERBLOCK_NO = 1
INODE_START = 2

# inode
NDIRECT = 12
NINDIRECT = BLOCK_BYTES // 4
INODE_BYTES = 64
INODE_PER_BLOCK = BLOCK_BYTES // INODE_BYTES
INODE_ROOT_NO = 1

# 目录项
DIRSIZ = 14
DIRECTORY_BYTES = 16
DIRECTORY_PER_BLOCK = BLOCK_BYTES // DIRECTORY_BYTES

# 位图
BITS_PER_BLOCK = BLOCK_BYTES * 8

SUPERBLOCK_BYTES = 12

# 是否输出调试信息
OUTPUT_LOG = os.environ.get("FCHECK_DEBUG", "").lower() in ("1", "true", "yes", "on")
