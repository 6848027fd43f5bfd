import errors as E
from errors import StructuralError
from inode import allocated_inodes
from object_accessor import ObjectAccessor
from utils import debug_print


class UniquenessChecker:
    """
    同一个数据块不能被多次引用
    直接块和间接块分开计数：一个块被直接引用一次、又被间接引用一次，不算重复
    """
    def __init__(self, object_accessor: ObjectAccessor):
        self.object_accessor = object_accessor
        self.superblock = object_accessor.superblock

    def count_usage(self) -> tuple[list[int], list[int]]:
        direct_counts = [0] * self.superblock.nblocks
        indirect_counts = [0] * self.superblock.nblocks

        for inode in allocated_inodes(self.object_accessor):
            for address in inode.direct_addresses:
                if address != 0 and self.superblock.in_data_region(address):
                    direct_counts[address - self.superblock.data_start] += 1
            for address in inode.indirect_addresses():
                if self.superblock.in_data_region(address):
                    indirect_counts[address - self.superblock.data_start] += 1

        return direct_counts, indirect_counts

    def check(self) -> None:
        debug_print("checking block uniqueness")
        direct_counts, indirect_counts = self.count_usage()
        if any(count > 1 for count in direct_counts):
            raise StructuralError(E.DIRECT_ADDRESS_REUSED)
        if any(count > 1 for count in indirect_counts):
            raise StructuralError(E.INDIRECT_ADDRESS_REUSED)
