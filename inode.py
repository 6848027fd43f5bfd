from typing import Any, Generator
from construct import Container
from enum import Enum
import constants as C
from object_accessor import ObjectAccessor
from indirect_block import IndirectBlock


class FILE_TYPE(Enum):
    FREE = 0
    DIR = 1
    FILE = 2
    DEVICE = 3


class Inode:
    """
    磁盘inode的只读视图
    addrs的前NDIRECT项是直接块号，最后一项是间接索引块号，0表示未使用
    type可能是任意值（损坏的映像），所以file_type只在合法时才有意义
    """
    def __init__(self, index: int, data: Container[Any], object_accessor: ObjectAccessor):
        self.index = index
        self.data = data
        self.object_accessor = object_accessor

    @classmethod
    def from_index(cls, index: int, object_accessor: ObjectAccessor) -> "Inode":
        """
        通过Inode号码构造Inode对象
        """
        return cls(index, object_accessor.inodes[index], object_accessor)

    @property
    def type(self) -> int:
        return self.data.type

    @property
    def has_valid_type(self) -> bool:
        return self.type in (FILE_TYPE.DIR.value, FILE_TYPE.FILE.value, FILE_TYPE.DEVICE.value)

    @property
    def file_type(self) -> FILE_TYPE:
        return FILE_TYPE(self.type)

    @property
    def is_free(self) -> bool:
        return self.type == FILE_TYPE.FREE.value

    @property
    def is_dir(self) -> bool:
        return self.type == FILE_TYPE.DIR.value

    @property
    def is_file(self) -> bool:
        return self.type == FILE_TYPE.FILE.value

    @property
    def nlink(self) -> int:
        return self.data.nlink

    @property
    def size(self) -> int:
        return self.data.size

    @property
    def direct_addresses(self) -> list[int]:
        return list(self.data.addrs[:C.NDIRECT])

    @property
    def indirect_address(self) -> int:
        return self.data.addrs[C.NDIRECT]

    def indirect_block(self) -> IndirectBlock | None:
        if self.indirect_address == 0:
            return None
        return IndirectBlock.from_index(self.indirect_address, self.object_accessor)

    def indirect_addresses(self) -> list[int]:
        """
        间接索引块中非0的块号；间接块号本身要先检查合法
        """
        block = self.indirect_block()
        if block is None:
            return []
        return block.used()

    def block_list(self) -> Generator[int, None, None]:
        """
        inode用到的所有块号：直接块、间接索引块本身、间接块
        """
        yield from (address for address in self.direct_addresses if address != 0)
        if self.indirect_address != 0:
            yield self.indirect_address
            yield from self.indirect_addresses()

    def data_blocks(self) -> Generator[int, None, None]:
        """
        存放文件内容的块号，不含间接索引块本身
        """
        yield from (address for address in self.direct_addresses if address != 0)
        yield from self.indirect_addresses()

    def __repr__(self):
        return f"Inode({self.index}, type={self.type}, nlink={self.nlink}, size={self.size})"


def allocated_inodes(object_accessor: ObjectAccessor) -> Generator[Inode, None, None]:
    """
    按编号顺序遍历所有非空闲的inode
    """
    for index in range(object_accessor.superblock.ninodes):
        inode = Inode.from_index(index, object_accessor)
        if not inode.is_free:
            yield inode
