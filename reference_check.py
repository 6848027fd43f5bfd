import constants as C
import errors as E
from errors import StructuralError
from dir_block import DirBlock
from inode import Inode
from object_accessor import ObjectAccessor
from utils import debug_print


class ReferenceChecker:
    """
    从根目录出发遍历目录树，统计每个inode被目录项引用的次数，
    再和inode的分配状态、链接数对照
    """
    def __init__(self, object_accessor: ObjectAccessor):
        self.object_accessor = object_accessor
        self.superblock = object_accessor.superblock
        # 目录项中超出inode表范围的引用
        self.dangling = 0

    def count_references(self) -> list[int]:
        """
        不记录已访问的inode，同一个目录被引用几次就展开几次；
        只有当目录出现在自己的祖先路径上（成环）时才不再展开
        """
        references = [0] * self.superblock.ninodes
        # 0号inode不用，1号是根目录，根目录没有别的目录项指向它
        references[0] += 1
        references[C.INODE_ROOT_NO] += 1
        self.dangling = 0

        # 栈中每项是(inode号, 深度)；path[d]是当前路径上深度为d的目录
        stack: list[tuple[int, int]] = [(C.INODE_ROOT_NO, 0)]
        path: list[int] = []
        on_path: set[int] = set()
        while stack:
            index, depth = stack.pop()
            # 深度优先，弹出的项的祖先正好是path[:depth]
            while len(path) > depth:
                on_path.discard(path.pop())

            inode = Inode.from_index(index, self.object_accessor)
            if not inode.is_dir:
                continue

            path.append(index)
            on_path.add(index)
            for address in inode.data_blocks():
                for entry in DirBlock.from_index(address, self.object_accessor).children():
                    if entry.inum >= self.superblock.ninodes:
                        self.dangling += 1
                        continue
                    references[entry.inum] += 1
                    if entry.inum in on_path:
                        debug_print(f"directory cycle through inode {entry.inum}")
                        continue
                    stack.append((entry.inum, depth + 1))

        return references

    def check(self) -> None:
        debug_print("counting directory references")
        references = self.count_references()

        for index in range(C.INODE_ROOT_NO + 1, self.superblock.ninodes):
            inode = Inode.from_index(index, self.object_accessor)
            count = references[index]
            if not inode.is_free and count == 0:
                raise StructuralError(E.INODE_NOT_IN_DIRECTORY)
            if count > 0 and inode.is_free:
                raise StructuralError(E.INODE_REFERRED_BUT_FREE)
            if inode.is_file and inode.nlink != count:
                raise StructuralError(E.BAD_FILE_REFERENCE_COUNT)
            if inode.is_dir and count > 1:
                raise StructuralError(E.DIRECTORY_REFERRED_TWICE)

        if self.dangling:
            raise StructuralError(E.INODE_REFERRED_BUT_FREE)
