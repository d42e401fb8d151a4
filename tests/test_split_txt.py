import html
import io
import os
import unittest

from txt_split import (chunk_budget, chunk_file_name, escape_line, estimate_total_chunks,
                       output_dir_for, read_lines, resolve_encoding, split_text)


def fixed_overhead(size):
    def overhead(file_name, estimated_total, chunk_index):
        return size
    return overhead


class TestSplitText(unittest.TestCase):
    def _split(self, lines, target_size, overhead_size=0, **kwargs):
        return list(split_text(lines, "book.txt", 1, overhead=fixed_overhead(overhead_size),
                               target_size=target_size, **kwargs))

    def test_empty_input(self):
        self.assertEqual(self._split([], 100), [])

    def test_lines_fit_in_one_chunk(self):
        chunks = self._split(["one", "two", "three"], 100)
        self.assertEqual(chunks, ["one\ntwo\nthree\n"])

    def test_break_before_overflowing_line(self):
        # each escaped line is 5 bytes, the budget is 10
        chunks = self._split(["abcd", "efgh", "ijkl"], 10)
        self.assertEqual(chunks, ["abcd\nefgh\n", "ijkl\n"])

    def test_overhead_is_subtracted_from_target(self):
        chunks = self._split(["abcd", "efgh", "ijkl"], 110, overhead_size=100)
        self.assertEqual(chunks, ["abcd\nefgh\n", "ijkl\n"])

    def test_single_oversized_line(self):
        line = "a" * 5000
        chunks = self._split([line], 100)
        self.assertEqual(chunks, [line + "\n"])

    def test_oversized_line_between_small_lines(self):
        big = "x" * 50
        chunks = self._split(["a", big, "b"], 10)
        self.assertEqual(chunks, ["a\n", big + "\n", "b\n"])

    def test_no_empty_chunks(self):
        chunks = self._split(["x" * 50, "y" * 50], 10)
        self.assertEqual(len(chunks), 2)
        for chunk in chunks:
            self.assertTrue(chunk)

    def test_negative_budget_falls_back_to_minimum(self):
        chunks = self._split(["abc", "def", "ghi"], 100, overhead_size=500, min_budget=8)
        self.assertEqual(chunks, ["abc\ndef\n", "ghi\n"])

    def test_budget_counts_utf8_bytes(self):
        # "中\n" is 2 characters but 4 bytes
        chunks = self._split(["中", "文", "字"], 8)
        self.assertEqual(chunks, ["中\n文\n", "字\n"])

    def test_budget_counts_escaped_size(self):
        # "&\n" escapes to "&amp;\n", 6 bytes
        chunks = self._split(["&", "&"], 10)
        self.assertEqual(chunks, ["&amp;\n", "&amp;\n"])

    def test_overhead_recomputed_per_chunk(self):
        calls = []

        def overhead(file_name, estimated_total, chunk_index):
            calls.append((file_name, estimated_total, chunk_index))
            return 0 if chunk_index < 3 else 5

        lines = ["abcd"] * 5
        chunks = list(split_text(lines, "book.txt", 42, overhead=overhead, target_size=10))

        self.assertEqual(calls, [("book.txt", 42, 1), ("book.txt", 42, 2), ("book.txt", 42, 3)])
        self.assertEqual(chunks, ["abcd\nabcd\n", "abcd\nabcd\n", "abcd\n"])

    def test_escaping(self):
        lines = ["<script>alert(1)</script>", "a & \"b\" 'c'"]
        combined = "".join(self._split(lines, 1000))
        self.assertNotIn("<script>", combined)
        self.assertNotIn('"', combined)
        self.assertIn("&lt;script&gt;alert(1)&lt;/script&gt;", combined)
        self.assertIn("&amp;", combined)
        self.assertIn("&quot;b&quot;", combined)
        self.assertIn("&#x27;c&#x27;", combined)

    def test_concatenation_restores_input(self):
        lines = ["line %d <%s> & done" % (i, "x" * (i % 17)) for i in range(200)]
        chunks = self._split(lines, 300)
        self.assertGreater(len(chunks), 1)
        restored = html.unescape("".join(chunks))
        self.assertEqual(restored, "".join(line + "\n" for line in lines))

    def test_empty_lines_are_kept(self):
        chunks = self._split(["", "", "a", ""], 100)
        self.assertEqual(chunks, ["\n\na\n\n"])


class TestHelpers(unittest.TestCase):
    def test_resolve_known_encodings(self):
        self.assertEqual(resolve_encoding("utf-8").name, "utf-8")
        self.assertEqual(resolve_encoding("utf8").name, "utf-8")
        self.assertEqual(resolve_encoding("utf-16").name, "utf-16")
        self.assertEqual(resolve_encoding("utf16").name, "utf-16")
        self.assertEqual(resolve_encoding("utf-16be").name, "utf-16-be")
        self.assertEqual(resolve_encoding("utf-16le").name, "utf-16-le")
        self.assertEqual(resolve_encoding("gbk").name, "gbk")
        self.assertEqual(resolve_encoding("ansi").name, "gbk")

    def test_resolve_ignores_case(self):
        self.assertEqual(resolve_encoding("GBK").name, "gbk")
        self.assertEqual(resolve_encoding(" UTF-8 ").name, "utf-8")

    def test_resolve_unknown_encoding(self):
        self.assertIsNone(resolve_encoding("latin-1"))
        self.assertIsNone(resolve_encoding(""))

    def test_escape_line(self):
        self.assertEqual(escape_line("a<b"), "a&lt;b\n")
        self.assertEqual(escape_line(""), "\n")

    def test_estimate_total_chunks(self):
        self.assertEqual(estimate_total_chunks(0), 1)
        self.assertEqual(estimate_total_chunks(299), 1)
        self.assertEqual(estimate_total_chunks(600), 2)
        self.assertEqual(estimate_total_chunks(30000), 100)

    def test_chunk_budget(self):
        self.assertEqual(chunk_budget(fixed_overhead(24), "a.txt", 1, 1, target_size=100), 76)
        self.assertEqual(chunk_budget(fixed_overhead(200), "a.txt", 1, 1, target_size=100), 1024)

    def test_read_lines(self):
        stream = io.StringIO("first\r\nsecond\nthird\rstill third\nlast")
        self.assertEqual(list(read_lines(stream)),
                         ["first", "second", "third\rstill third", "last"])

    def test_read_lines_trailing_newline(self):
        self.assertEqual(list(read_lines(io.StringIO("a\nb\n"))), ["a", "b"])
        self.assertEqual(list(read_lines(io.StringIO(""))), [])

    def test_file_names(self):
        self.assertEqual(chunk_file_name("some/dir/book.txt", 3), "book_chunk_3.html")
        self.assertEqual(chunk_file_name("notes", 1), "notes_chunk_1.html")
        self.assertEqual(output_dir_for("some/dir/book.txt"), "book.txt_html_chunks")
        self.assertEqual(output_dir_for("book.txt", "out"), os.path.join("out", "book.txt_html_chunks"))


if __name__ == '__main__':
    unittest.main()
