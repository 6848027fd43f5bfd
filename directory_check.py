import constants as C
import errors as E
from errors import StructuralError
from dir_block import DirBlock, entry_name
from inode import Inode
from object_accessor import ObjectAccessor


class DirectoryChecker:
    """
    检查根目录是否存在，以及每个目录是否都有正确的.和..
    只看直接块，间接块里的目录项不参与这里的检查
    """
    def __init__(self, object_accessor: ObjectAccessor):
        self.object_accessor = object_accessor

    def check_root(self, root: Inode) -> None:
        """
        根目录必须是目录，且第一个数据块的前两项依次是指向自己的.和..
        """
        if not root.is_dir or root.direct_addresses[0] == 0:
            raise StructuralError(E.ROOT_NOT_EXIST)

        first_block = DirBlock.from_index(root.direct_addresses[0], self.object_accessor)
        for slot, name in enumerate((b".", b"..")):
            entry = first_block[slot]
            if entry_name(entry) != name or entry.inum != C.INODE_ROOT_NO:
                raise StructuralError(E.ROOT_NOT_EXIST)

    def check(self, inode: Inode) -> None:
        found_dot = found_dotdot = False

        for address in inode.direct_addresses:
            if address == 0:
                continue
            for entry in DirBlock.from_index(address, self.object_accessor):
                name = entry_name(entry)
                if name == b".":
                    found_dot = True
                    if entry.inum != inode.index:
                        raise StructuralError(E.DIR_NOT_FORMATTED)
                elif name == b"..":
                    found_dotdot = True
                    self._check_parent(inode, entry.inum)
                if found_dot and found_dotdot:
                    return

        raise StructuralError(E.DIR_NOT_FORMATTED)

    def _check_parent(self, inode: Inode, parent: int) -> None:
        # 根目录的父目录是自己，其他目录的父目录不能是自己
        if inode.index == C.INODE_ROOT_NO:
            bad_parent = parent != C.INODE_ROOT_NO
        else:
            bad_parent = parent == inode.index
        if bad_parent:
            raise StructuralError(E.ROOT_NOT_EXIST)
