import errors as E
from errors import StructuralError
from inode import Inode
from object_accessor import ObjectAccessor


class InodeChecker:
    """
    单个inode的结构检查：类型是否合法，直接/间接块号是否在磁盘范围内
    """
    def __init__(self, object_accessor: ObjectAccessor):
        self.object_accessor = object_accessor
        self.superblock = object_accessor.superblock

    def check(self, inode: Inode) -> None:
        self.check_type(inode)
        self.check_addresses(inode)

    def check_type(self, inode: Inode) -> None:
        if not inode.has_valid_type:
            raise StructuralError(E.BAD_INODE)

    def check_addresses(self, inode: Inode) -> None:
        for address in inode.direct_addresses:
            if address != 0 and not self.superblock.is_valid_address(address):
                raise StructuralError(E.BAD_DIRECT_ADDRESS)

        if inode.indirect_address == 0:
            return
        if not self.superblock.is_valid_address(inode.indirect_address):
            raise StructuralError(E.BAD_INDIRECT_ADDRESS)
        for address in inode.indirect_addresses():
            if not self.superblock.is_valid_address(address):
                raise StructuralError(E.BAD_INDIRECT_ADDRESS)
