from io import BytesIO
import unittest

from qoa import MalformedContainer, QoaHeader, TruncatedStream, frame_count


class TestQoaHeader(unittest.TestCase):
    FRAME_COUNTS: list[tuple[int, int]] = [
        (0, 1),
        (20, 1),
        (5119, 1),
        (5120, 2),
        (5121, 2),
        (10240, 3),
    ]

    def test_read(self):
        stream = BytesIO(b"qoaf\x00\x01\x00\x20")
        header = QoaHeader.read(stream)
        self.assertEqual(b"qoaf", header.magic_bytes)
        self.assertEqual(0x00010020, header.sample_count)
        self.assertEqual(8, stream.tell())

    def test_read_invalid_magic_bytes(self):
        with self.assertRaises(MalformedContainer):
            QoaHeader.read(BytesIO(b"qoaF\x00\x00\x00\x14"))

    def test_read_truncated(self):
        with self.assertRaises(TruncatedStream):
            QoaHeader.read(BytesIO(b"qoaf\x00\x00"))
        with self.assertRaises(TruncatedStream):
            QoaHeader.read(BytesIO(b""))

    def test_write(self):
        stream = BytesIO()
        QoaHeader(QoaHeader.MAGIC_BYTES, 44100).write(stream)
        self.assertEqual(b"qoaf\x00\x00\xac\x44", stream.getvalue())

    def test_frame_count(self):
        for sample_count, expected in TestQoaHeader.FRAME_COUNTS:
            with self.subTest(sample_count=sample_count):
                self.assertEqual(expected, frame_count(sample_count))
                header = QoaHeader(QoaHeader.MAGIC_BYTES, sample_count)
                self.assertEqual(expected, header.frame_count)


if __name__ == "__main__":
    unittest.main()
