import os
import unittest

import errors as E
from image_case import ImageTestCase


class CommandLineTestCase(ImageTestCase):
    def test_missing_argument(self):
        status, output = self.run_fcheck([])
        self.assertEqual(status, 1)
        self.assertEqual(output, E.USAGE + "\n")

    def test_too_many_arguments(self):
        status, output = self.run_fcheck([self.path, self.path])
        self.assertEqual(status, 1)
        self.assertEqual(output, E.USAGE + "\n")

    def test_image_not_found(self):
        status, output = self.run_fcheck([os.path.join(self.tempdir.name, "missing.img")])
        self.assertEqual(status, 1)
        self.assertEqual(output, "image not found\n")

    def test_image_is_a_directory(self):
        status, output = self.run_fcheck([self.tempdir.name])
        self.assertEqual(status, 1)
        self.assertEqual(output, "image not found\n")

    def test_empty_image(self):
        self.save(b"")
        status, output = self.run_fcheck([self.path])
        self.assertEqual(status, 1)
        self.assertEqual(output, "image not found\n")

    def test_truncated_image(self):
        # 超级块完整，但inode区被截断
        self.save(bytes(self.image[:1024]))
        status, output = self.run_fcheck([self.path])
        self.assertEqual(status, 1)
        self.assertEqual(output, "image truncated\n")

    def test_success_is_silent(self):
        status, output = self.run_fcheck()
        self.assertEqual((status, output), (0, ""))

    def test_violation_message(self):
        self.set_inode(self.file, type=12)
        status, output = self.run_fcheck()
        self.assertEqual(status, 1)
        self.assertEqual(output, "ERROR: bad inode.\n")


if __name__ == '__main__':
    unittest.main()
