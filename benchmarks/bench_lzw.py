"""Benchmarks for tifflzw.lzw module."""

from typing import Any

from tifflzw.lzw import BitReader, LZWDecoder, lzwdecode


class TestLZWBenchmarks:
    """Benchmarks for the strip decoder."""

    def test_decode_text(self, benchmark: Any, text_strip: bytes) -> None:
        """Benchmark lzwdecode() on a well compressed strip."""
        result = benchmark(lzwdecode, text_strip)
        assert len(result) > 0

    def test_decode_noise(self, benchmark: Any, noise_strip: bytes) -> None:
        """Benchmark lzwdecode() on a strip that clears the table often."""
        result = benchmark(lzwdecode, noise_strip)
        assert len(result) == 100_000

    def test_read_codes(self, benchmark: Any, noise_strip: bytes) -> None:
        """Benchmark BitReader.read() alone - the per-code hotspot."""

        def read_all_codes() -> int:
            reader = BitReader(noise_strip)
            count = 0
            for _ in range(len(noise_strip) * 8 // 12):
                reader.read(12)
                count += 1
            return count

        result = benchmark(read_all_codes)
        assert result > 0

    def test_run_chunks(self, benchmark: Any, text_strip: bytes) -> None:
        """Benchmark consuming run() without joining the output."""

        def count_chunks() -> int:
            return sum(1 for _ in LZWDecoder(text_strip).run())

        result = benchmark(count_chunks)
        assert result > 0
