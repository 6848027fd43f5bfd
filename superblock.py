from construct import Container
import constants as C
from structures import SuperBlockStruct


class Superblock:
    """
    超级块只记录总块数、数据块数和inode数，
    其余的布局（inode区、位图区、数据区的起点）都由这三个值推算出来
    """
    def __init__(self, data: Container):
        self.data = data

    @classmethod
    def parse(cls, raw: bytes) -> "Superblock":
        return cls(SuperBlockStruct.parse(raw))

    @property
    def size(self) -> int:
        return self.data.size

    @property
    def nblocks(self) -> int:
        return self.data.nblocks

    @property
    def ninodes(self) -> int:
        return self.data.ninodes

    @property
    def inode_blocks(self) -> int:
        return self.ninodes // C.INODE_PER_BLOCK + 1

    @property
    def bitmap_start(self) -> int:
        return C.INODE_START + self.inode_blocks

    @property
    def bitmap_blocks(self) -> int:
        return self.size // C.BITS_PER_BLOCK + 1

    @property
    def data_start(self) -> int:
        return self.bitmap_start + self.bitmap_blocks

    def is_valid_address(self, address: int) -> bool:
        return 0 <= address < self.size

    def in_data_region(self, address: int) -> bool:
        return self.data_start <= address < self.data_start + self.nblocks

    def __repr__(self):
        return (f"Superblock(size={self.size}, nblocks={self.nblocks}, ninodes={self.ninodes}, "
                f"bitmap_start={self.bitmap_start}, data_start={self.data_start})")
