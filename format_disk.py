from construct import Container
import constants as C
from inode import FILE_TYPE
from structures import SuperBlockStruct, InodeStruct, DirectoryStruct, IndirectBlockStruct


class _InodeImage:
    def __init__(self, file_type: FILE_TYPE, major: int = 0, minor: int = 0):
        self.file_type = file_type
        self.major = major
        self.minor = minor
        self.nlink = 0
        self.content = b""


class ImageBuilder:
    """
    生成一个一致的xv6磁盘映像，用作fcheck的参照
    布局：引导块、超级块、inode区、位图区、数据区
    数据块按inode编号顺序依次分配，内容不超过NDIRECT + NINDIRECT块
    """
    def __init__(self, size: int = 1024, ninodes: int = 200):
        self.size = size
        self.ninodes = ninodes
        self.inode_blocks = ninodes // C.INODE_PER_BLOCK + 1
        self.bitmap_start = C.INODE_START + self.inode_blocks
        self.bitmap_blocks = size // C.BITS_PER_BLOCK + 1
        self.data_start = self.bitmap_start + self.bitmap_blocks
        assert self.data_start < size, "image too small"
        self.nblocks = size - self.data_start

        self.inodes: dict[int, _InodeImage] = {}
        root = self._allocate_inode(FILE_TYPE.DIR)
        assert root == C.INODE_ROOT_NO
        self._add_entry(root, ".", root)
        self._add_entry(root, "..", root)
        self.inodes[root].nlink = 1

    def _allocate_inode(self, file_type: FILE_TYPE, **kwargs) -> int:
        for index in range(1, self.ninodes):
            if index not in self.inodes:
                self.inodes[index] = _InodeImage(file_type, **kwargs)
                return index
        raise Exception("No free inode")

    def _add_entry(self, dir_index: int, name: str, index: int) -> None:
        name_bytes = name.encode()
        assert len(name_bytes) <= C.DIRSIZ, f"name too long: {name}"
        entry = DirectoryStruct.build(Container(inum=index, name=name_bytes.ljust(C.DIRSIZ, b"\x00")))
        self.inodes[dir_index].content += entry

    def mkdir(self, parent: int, name: str) -> int:
        assert self.inodes[parent].file_type == FILE_TYPE.DIR
        index = self._allocate_inode(FILE_TYPE.DIR)
        self._add_entry(index, ".", index)
        self._add_entry(index, "..", parent)
        self._add_entry(parent, name, index)
        self.inodes[index].nlink = 1
        return index

    def create_file(self, parent: int, name: str, data: bytes = b"") -> int:
        index = self._allocate_inode(FILE_TYPE.FILE)
        self.inodes[index].content = data
        self.link(parent, name, index)
        return index

    def mknod(self, parent: int, name: str, major: int = 1, minor: int = 1) -> int:
        index = self._allocate_inode(FILE_TYPE.DEVICE, major=major, minor=minor)
        self.link(parent, name, index)
        return index

    def link(self, parent: int, name: str, index: int) -> None:
        assert self.inodes[parent].file_type == FILE_TYPE.DIR
        self._add_entry(parent, name, index)
        self.inodes[index].nlink += 1

    # 偏移量，用于在测试中构造损坏的映像
    def block_offset(self, block_index: int) -> int:
        return block_index * C.BLOCK_BYTES

    def inode_offset(self, index: int) -> int:
        return C.INODE_START * C.BLOCK_BYTES + index * C.INODE_BYTES

    def bitmap_offset(self, block_index: int) -> tuple[int, int]:
        """
        返回(字节偏移, 位掩码)
        """
        return self.bitmap_start * C.BLOCK_BYTES + block_index // 8, 1 << (block_index % 8)

    def build(self) -> bytes:
        image = bytearray(self.size * C.BLOCK_BYTES)
        next_free = self.data_start

        def allocate_block() -> int:
            nonlocal next_free
            if next_free >= self.size:
                raise Exception("No free block")
            next_free += 1
            return next_free - 1

        def write_block(block_index: int, data: bytes) -> None:
            offset = self.block_offset(block_index)
            image[offset:offset + len(data)] = data

        self.addrs: dict[int, list[int]] = {}
        for index in sorted(self.inodes):
            inode = self.inodes[index]
            chunks = [inode.content[i:i + C.BLOCK_BYTES]
                      for i in range(0, len(inode.content), C.BLOCK_BYTES)]
            assert len(chunks) <= C.NDIRECT + C.NINDIRECT, "file too large"

            addrs = [0] * (C.NDIRECT + 1)
            indirect = [0] * C.NINDIRECT
            for n, chunk in enumerate(chunks):
                block_index = allocate_block()
                if n < C.NDIRECT:
                    addrs[n] = block_index
                else:
                    if addrs[C.NDIRECT] == 0:
                        addrs[C.NDIRECT] = allocate_block()
                    indirect[n - C.NDIRECT] = block_index
                write_block(block_index, chunk)
            if addrs[C.NDIRECT] != 0:
                write_block(addrs[C.NDIRECT], IndirectBlockStruct.build(indirect))
            self.addrs[index] = addrs

            record = Container(
                type=inode.file_type.value,
                major=inode.major,
                minor=inode.minor,
                nlink=inode.nlink,
                size=len(inode.content),
                addrs=addrs,
            )
            offset = self.inode_offset(index)
            image[offset:offset + C.INODE_BYTES] = InodeStruct.build(record)

        superblock = Container(size=self.size, nblocks=self.nblocks, ninodes=self.ninodes)
        write_block(C.SUPERBLOCK_NO, SuperBlockStruct.build(superblock))

        # 元数据块和已分配的数据块都在位图中标记
        for block_index in range(next_free):
            offset, mask = self.bitmap_offset(block_index)
            image[offset] |= mask

        return bytes(image)

    def save(self, path: str) -> None:
        with open(path, "wb") as f:
            f.write(self.build())

