import constants as C
import errors as E
from errors import StructuralError
from block_device import BlockDevice
from object_accessor import ObjectAccessor
from inode import Inode
from inode_check import InodeChecker
from directory_check import DirectoryChecker
from bitmap_check import BitmapChecker
from uniqueness_check import UniquenessChecker
from reference_check import ReferenceChecker
from utils import debug_print


class FileSystemChecker:
    """
    按固定顺序执行所有一致性检查，遇到第一个错误就抛出StructuralError
    检查过程中不会修改映像
    """
    def __init__(self, path: str):
        self.path = path
        self.mounted = False

    def mount(self) -> None:
        debug_print(f"FileSystemChecker.mount({self.path})")
        if self.mounted:
            return
        self.block_device = BlockDevice(self.path)
        self.object_accessor = ObjectAccessor(self.block_device)
        try:
            self.superblock = self.object_accessor.superblock
        except Exception:
            self.block_device.close()
            raise
        debug_print(self.superblock)
        self.mounted = True

    def unmount(self) -> None:
        debug_print("FileSystemChecker.unmount()")
        if not self.mounted:
            return
        self.block_device.close()
        self.mounted = False

    def __enter__(self) -> "FileSystemChecker":
        self.mount()
        return self

    def __exit__(self, *exc) -> None:
        self.unmount()

    def check(self) -> None:
        self.check_inodes()
        BitmapChecker(self.object_accessor).check_unused()
        UniquenessChecker(self.object_accessor).check()
        ReferenceChecker(self.object_accessor).check()
        debug_print("[bold green]file system is consistent[/bold green]")

    def check_inodes(self) -> None:
        """
        逐个inode依次做：类型、块号范围、根目录、.和..、位图
        """
        debug_print("checking inodes")
        inode_checker = InodeChecker(self.object_accessor)
        directory_checker = DirectoryChecker(self.object_accessor)
        bitmap_checker = BitmapChecker(self.object_accessor)

        for index in range(self.superblock.ninodes):
            inode = Inode.from_index(index, self.object_accessor)
            if inode.is_free:
                if index == C.INODE_ROOT_NO:
                    raise StructuralError(E.ROOT_NOT_EXIST)
                continue

            inode_checker.check(inode)
            if index == C.INODE_ROOT_NO:
                directory_checker.check_root(inode)
            if inode.is_dir:
                directory_checker.check(inode)
            bitmap_checker.check_inode(inode)

        # inode表太小，连根目录都放不下
        if self.superblock.ninodes <= C.INODE_ROOT_NO:
            raise StructuralError(E.ROOT_NOT_EXIST)


def check_image(path: str) -> None:
    with FileSystemChecker(path) as checker:
        checker.check()
