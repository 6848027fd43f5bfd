import constants as C
from construct import Container
from object_accessor import ObjectAccessor


def entry_name(entry: Container) -> bytes:
    # 按C字符串取名字
    return entry.name.split(b"\x00", 1)[0]


class DirBlock:
    def __init__(self, dir_block_index: int, dirs: list[Container]):
        self.dir_block_index = dir_block_index
        self.dirs = dirs
        assert len(self.dirs) == C.DIRECTORY_PER_BLOCK

    @classmethod
    def from_index(cls, index: int, object_accessor: ObjectAccessor) -> "DirBlock":
        """
        通过块号构造目录块对象
        """
        return cls(index, object_accessor.dir_blocks[index])

    def __getitem__(self, index: int) -> Container:
        return self.dirs[index]

    def __iter__(self):
        return iter(self.dirs)

    def children(self) -> list[Container]:
        """
        除了.和..之外、inode号非0的目录项
        """
        return [dir for dir in self.dirs
                if dir.inum != 0 and entry_name(dir) not in (b".", b"..")]
