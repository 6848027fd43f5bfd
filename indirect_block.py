import constants as C
from object_accessor import ObjectAccessor


class IndirectBlock:
    def __init__(self, data_block_index: int, indexes: list[int]):
        self.data_block_index = data_block_index
        self.indexes = indexes
        assert len(self.indexes) == C.NINDIRECT

    @classmethod
    def from_index(cls, index: int, object_accessor: ObjectAccessor) -> "IndirectBlock":
        """
        通过块号构造索引对象
        """
        return cls(index, object_accessor.indirect_blocks[index])

    def used(self) -> list[int]:
        return [index for index in self.indexes if index != 0]
