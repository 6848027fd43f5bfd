import os
import tempfile
import unittest

import constants as C
from block_device import BlockDevice
from construct import Container
from dir_block import DirBlock, entry_name
from errors import AccessError, TruncatedImageError
from format_disk import ImageBuilder
from indirect_block import IndirectBlock
from inode import Inode, FILE_TYPE, allocated_inodes
from object_accessor import ObjectAccessor
from record_array import RecordArray
from structures import SuperBlockStruct
from superblock import Superblock


class SuperblockTestCase(unittest.TestCase):
    def test_geometry(self):
        superblock = Superblock.parse(SuperBlockStruct.build(Container(size=1024, nblocks=995, ninodes=200)))
        self.assertEqual(superblock.inode_blocks, 26)
        self.assertEqual(superblock.bitmap_start, 28)
        self.assertEqual(superblock.bitmap_blocks, 1)
        self.assertEqual(superblock.data_start, 29)

    def test_address_ranges(self):
        superblock = Superblock(Container(size=100, nblocks=90, ninodes=8))
        self.assertTrue(superblock.is_valid_address(0))
        self.assertTrue(superblock.is_valid_address(99))
        self.assertFalse(superblock.is_valid_address(100))
        self.assertFalse(superblock.in_data_region(superblock.data_start - 1))
        self.assertTrue(superblock.in_data_region(superblock.data_start))
        self.assertFalse(superblock.in_data_region(superblock.data_start + 90))


class RecordArrayTestCase(unittest.TestCase):
    def setUp(self):
        self.array = [10, 20, 30, 40, 50]
        self.reads = []

        def getter(index):
            self.reads.append(index)
            return self.array[index]

        self.records = RecordArray(len(self.array), getter, "number")

    def test_item_access(self):
        self.assertEqual(self.records[1], 20)
        self.assertEqual(self.reads, [1])

    def test_out_of_range(self):
        with self.assertRaises(IndexError):
            self.records[5]
        with self.assertRaises(IndexError):
            self.records[-1]
        self.assertEqual(self.reads, [])

    def test_iteration(self):
        self.assertEqual(list(self.records), self.array)
        self.assertEqual(len(self.records), 5)


class RecordViewTestCase(unittest.TestCase):
    def setUp(self):
        self.tempdir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tempdir.name, "fs.img")
        builder = ImageBuilder(size=256, ninodes=32)
        self.dir = builder.mkdir(C.INODE_ROOT_NO, "dir")
        self.file = builder.create_file(self.dir, "file", b"x" * (C.NDIRECT + 2) * C.BLOCK_BYTES)
        builder.save(self.path)
        self.builder = builder
        self.block_device = BlockDevice(self.path)
        self.accessor = ObjectAccessor(self.block_device)

    def tearDown(self):
        self.block_device.close()
        self.tempdir.cleanup()

    def test_inode_view(self):
        inode = Inode.from_index(self.file, self.accessor)
        self.assertEqual(inode.file_type, FILE_TYPE.FILE)
        self.assertEqual(inode.nlink, 1)
        self.assertEqual(inode.size, (C.NDIRECT + 2) * C.BLOCK_BYTES)
        self.assertEqual(inode.direct_addresses, self.builder.addrs[self.file][:C.NDIRECT])
        self.assertEqual(len(inode.indirect_addresses()), 2)
        # 直接块 + 间接索引块 + 两个间接块
        self.assertEqual(len(list(inode.block_list())), C.NDIRECT + 3)
        self.assertEqual(len(list(inode.data_blocks())), C.NDIRECT + 2)

    def test_indirect_block(self):
        inode = Inode.from_index(self.file, self.accessor)
        block = IndirectBlock.from_index(inode.indirect_address, self.accessor)
        self.assertEqual(block.used(), inode.indirect_addresses())
        self.assertEqual(block.indexes[2:], [0] * (C.NINDIRECT - 2))

    def test_dir_block(self):
        inode = Inode.from_index(self.dir, self.accessor)
        block = DirBlock.from_index(inode.direct_addresses[0], self.accessor)
        self.assertEqual(entry_name(block[0]), b".")
        self.assertEqual((entry_name(block[1]), block[1].inum), (b"..", C.INODE_ROOT_NO))
        self.assertEqual([entry.inum for entry in block.children()], [self.file])

    def test_allocated_inodes(self):
        indexes = [inode.index for inode in allocated_inodes(self.accessor)]
        self.assertEqual(indexes, [C.INODE_ROOT_NO, self.dir, self.file])

    def test_block_number_beyond_image(self):
        with self.assertRaises(IndexError):
            self.accessor.dir_blocks[self.accessor.superblock.size]

    def test_bitmap(self):
        superblock = self.accessor.superblock
        self.assertTrue(self.accessor.is_allocated(superblock.data_start))
        self.assertFalse(self.accessor.is_allocated(superblock.size - 1))


class BlockDeviceTestCase(unittest.TestCase):
    def setUp(self):
        self.tempdir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tempdir.name, "fs.img")
        with open(self.path, "wb") as f:
            f.write(bytes(range(256)) * 4)

    def tearDown(self):
        self.tempdir.cleanup()

    def test_read(self):
        with BlockDevice(self.path) as block_device:
            self.assertEqual(block_device.block_count, 2)
            self.assertEqual(block_device.read_block_bytes(1, 2, 3), bytes([2, 3, 4]))
            self.assertEqual(len(block_device.read_block(1)), C.BLOCK_BYTES)

    def test_read_past_end(self):
        with BlockDevice(self.path) as block_device:
            with self.assertRaises(TruncatedImageError):
                block_device.read_block(2)

    def test_missing_image(self):
        with self.assertRaises(AccessError):
            BlockDevice(os.path.join(self.tempdir.name, "missing.img"))


if __name__ == '__main__':
    unittest.main()
