from construct import Container
import constants as C
from block_device import BlockDevice
from record_array import RecordArray
from structures import InodeStruct, DirectoryBlockStruct, IndirectBlockStruct
from superblock import Superblock


class ObjectAccessor:
    """
    提供访问磁盘上数据结构的只读接口
    只负责单个对象的读取和解析，不考虑多个对象之间的联系
    """
    def __init__(self, block_device: BlockDevice):
        self.block_device = block_device
        self._superblock: Superblock | None = None

    # 给下面读数据块用的工厂方法，块号就是磁盘上的绝对块号
    def _create_block_array(self, parser, item_type, kind: str) -> RecordArray:
        def getter(index):
            return parser(self.block_device.read_block(index))

        return RecordArray[item_type](self.superblock.size, getter, kind)

    # 超级块只读一次
    @property
    def superblock(self) -> Superblock:
        if self._superblock is None:
            raw = self.block_device.read_block_bytes(C.SUPERBLOCK_NO, 0, C.SUPERBLOCK_BYTES)
            self._superblock = Superblock.parse(raw)
        return self._superblock

    @property
    def inodes(self) -> RecordArray[Container]:
        def getter(index) -> Container:
            offset = C.INODE_START * C.BLOCK_BYTES + index * C.INODE_BYTES
            return InodeStruct.parse(self.block_device.read_bytes(offset, C.INODE_BYTES))

        return RecordArray[Container](self.superblock.ninodes, getter, "inode")

    # 目录数据块
    @property
    def dir_blocks(self) -> RecordArray[list[Container]]:
        return self._create_block_array(DirectoryBlockStruct.parse, list[Container], "directory block")

    # 间接索引块
    @property
    def indirect_blocks(self) -> RecordArray[list[int]]:
        return self._create_block_array(IndirectBlockStruct.parse, list[int], "indirect block")

    # 位图
    def is_allocated(self, block_index: int) -> bool:
        offset = self.superblock.bitmap_start * C.BLOCK_BYTES + block_index // 8
        byte = self.block_device.read_bytes(offset, 1)[0]
        return (byte >> (block_index % 8)) & 1 == 1
