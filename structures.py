from construct import Struct, Int16sl, Int16ul, Int32ul, Array, Bytes
import constants as C

# 超级块
SuperBlockStruct = Struct(
    "size" / Int32ul,     # 总盘块数
    "nblocks" / Int32ul,  # 数据块数
    "ninodes" / Int32ul,
)
assert SuperBlockStruct.sizeof() == C.SUPERBLOCK_BYTES

# inode
InodeStruct = Struct(
    "type" / Int16sl,
    "major" / Int16sl,
    "minor" / Int16sl,
    "nlink" / Int16sl,
    "size" / Int32ul,
    "addrs" / Int32ul[C.NDIRECT + 1],
)
assert InodeStruct.sizeof() == C.INODE_BYTES

# 目录文件数据块
# 名字按C字符串处理，可能不以\0结尾，所以这里不用PaddedString
DirectoryStruct = Struct(
    "inum" / Int16ul,
    "name" / Bytes(C.DIRSIZ),
)
assert DirectoryStruct.sizeof() == C.DIRECTORY_BYTES

DirectoryBlockStruct = Array(C.DIRECTORY_PER_BLOCK, DirectoryStruct)
assert DirectoryBlockStruct.sizeof() == C.BLOCK_BYTES

# 间接索引块
IndirectBlockStruct = Array(C.NINDIRECT, Int32ul)
assert IndirectBlockStruct.sizeof() == C.BLOCK_BYTES
