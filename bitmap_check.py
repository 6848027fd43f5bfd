import errors as E
from errors import StructuralError
from inode import Inode, allocated_inodes
from object_accessor import ObjectAccessor
from utils import debug_print


class BitmapChecker:
    """
    位图与inode实际使用情况的双向比对
    """
    def __init__(self, object_accessor: ObjectAccessor):
        self.object_accessor = object_accessor
        self.superblock = object_accessor.superblock

    def check_inode(self, inode: Inode) -> None:
        """
        inode用到的每个块在位图中都必须是已分配
        """
        for address in inode.block_list():
            if not self.object_accessor.is_allocated(address):
                raise StructuralError(E.ADDRESS_MARKED_FREE)

    def used_blocks(self) -> list[bool]:
        """
        数据区每个块是否被某个inode用到，下标是相对数据区起点的偏移
        """
        used = [False] * self.superblock.nblocks
        for inode in allocated_inodes(self.object_accessor):
            for address in inode.block_list():
                if self.superblock.in_data_region(address):
                    used[address - self.superblock.data_start] = True
        return used

    def check_unused(self) -> None:
        """
        位图中标记为已分配的数据块必须真的被用到
        """
        debug_print("checking bitmap against block usage")
        used = self.used_blocks()
        for offset, in_use in enumerate(used):
            address = self.superblock.data_start + offset
            if not in_use and self.object_accessor.is_allocated(address):
                debug_print(f"block {address} is marked in use")
                raise StructuralError(E.BITMAP_BLOCK_UNUSED)
