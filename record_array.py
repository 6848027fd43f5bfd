from typing import Callable, Generic, Iterator, TypeVar

RecordType = TypeVar('RecordType')


class RecordArray(Generic[RecordType]):
    """
    定长的磁盘记录序列（inode表、数据块），按编号读取时才解析
    编号越界说明映像本身有问题，抛出IndexError而不是去读别的位置
    """
    def __init__(self, count: int, reader: Callable[[int], RecordType], kind: str = "record"):
        self.count = count
        self.reader = reader
        self.kind = kind

    def __getitem__(self, number: int) -> RecordType:
        if not 0 <= number < self.count:
            raise IndexError(f"{self.kind} {number} out of range [0, {self.count})")
        return self.reader(number)

    def __len__(self) -> int:
        return self.count

    def __iter__(self) -> Iterator[RecordType]:
        return map(self.reader, range(self.count))
