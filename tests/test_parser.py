import tempfile
import unittest
from pathlib import Path

from linegroup.errors import InputUnavailableError, ParseError
from linegroup.parser import parse_lines, read_records
from linegroup.record_data import Record


def parse_one(line):
    recs = parse_lines([line])
    return recs[0] if recs else None


class TestLineFormat(unittest.TestCase):

    def test_accepts_three_quoted_fields(self):
        rec = parse_one('"a";"b";"c"')
        self.assertEqual(rec, Record(0, ('"a"', '"b"', '"c"')))
        self.assertEqual(str(rec), '"a":"b":"c"')

    def test_keeps_empty_quotes(self):
        rec = parse_one('"";"";""')
        self.assertEqual(rec.fields, ('""', '""', '""'))

    def test_rejects_two_fields(self):
        self.assertIsNone(parse_one('"a";"b"'))

    def test_rejects_partial_match(self):
        self.assertIsNone(parse_one('x"a";"b";"c"'))
        self.assertIsNone(parse_one('"a";"b";"c"x'))
        self.assertIsNone(parse_one('"a";"b";"c" '))

    def test_rejects_unquoted_and_blank(self):
        self.assertIsNone(parse_one("a;b;c"))
        self.assertIsNone(parse_one(""))

    def test_extra_fields_fold_into_first(self):
        # greedy fields: the last two quoted fields bind, the rest is field 0
        rec = parse_one('"a";"b";"c";"d"')
        self.assertEqual(rec.fields, ('"a";"b"', '"c"', '"d"'))


class TestParseLines(unittest.TestCase):

    def test_rejected_lines_take_no_index(self):
        lines = ['"a";"b";"c"\n', "garbage\n", '"a";"b"\n', '"d";"e";"f"\n']
        recs = parse_lines(lines)
        self.assertEqual(
            recs,
            [Record(0, ('"a"', '"b"', '"c"')), Record(1, ('"d"', '"e"', '"f"'))],
        )

    def test_strips_crlf(self):
        recs = parse_lines(['"a";"b";"c"\r\n'])
        self.assertEqual(recs[0].fields, ('"a"', '"b"', '"c"'))

    def test_no_lines(self):
        self.assertEqual(parse_lines([]), [])

    def test_all_rejected(self):
        self.assertEqual(parse_lines(["x", '"a";"b"']), [])

    def test_partial_matches_do_not_shift_indices(self):
        lines = ['"1";"2";"3"', '"a" ;"b";"c"', '"";"x";""', "bad", '"q";"w";"e";"r"']
        recs = parse_lines(lines)
        self.assertEqual([r.index for r in recs], [0, 1, 2])
        self.assertEqual(
            [r.render() for r in recs],
            ['"1":"2":"3"', '"":"x":""', '"q";"w":"e":"r"'],
        )

    def test_logs_rejected_line_numbers(self):
        with self.assertLogs("linegroup.parser", level="DEBUG") as cm:
            parse_lines(['"a";"b";"c"', "bad", '"a";"b";"c"', "worse"])
        self.assertTrue(any("Rejected 2 malformed lines: [2, 4]" in m for m in cm.output))


class TestReadRecords(unittest.TestCase):

    def test_reads_file(self):
        with tempfile.TemporaryDirectory() as td:
            p = Path(td) / "input.txt"
            p.write_text('"a";"b";"c"\n"a";"b"\n"x";"y";"z"\n', encoding="utf-8")
            recs = read_records(p)
            self.assertEqual([r.index for r in recs], [0, 1])
            self.assertEqual(recs[1].render(), '"x":"y":"z"')

    def test_empty_file(self):
        with tempfile.TemporaryDirectory() as td:
            p = Path(td) / "input.txt"
            p.write_text("", encoding="utf-8")
            self.assertEqual(read_records(p), [])

    def test_missing_file(self):
        with tempfile.TemporaryDirectory() as td:
            with self.assertRaises(InputUnavailableError) as cm:
                read_records(Path(td) / "nope.txt")
            self.assertIsInstance(cm.exception, ParseError)
            self.assertTrue(cm.exception.path.endswith("nope.txt"))

    def test_directory_is_unavailable(self):
        with tempfile.TemporaryDirectory() as td:
            with self.assertRaises(InputUnavailableError):
                read_records(td)

    def test_undecodable_file(self):
        with tempfile.TemporaryDirectory() as td:
            p = Path(td) / "input.txt"
            p.write_bytes(b'"\xff";"b";"c"\n')
            with self.assertRaises(ParseError) as cm:
                read_records(p)
            self.assertIsInstance(cm.exception.cause, UnicodeDecodeError)

    def test_unknown_encoding(self):
        with tempfile.TemporaryDirectory() as td:
            p = Path(td) / "input.txt"
            p.write_text('"a";"b";"c"\n', encoding="utf-8")
            with self.assertRaises(ParseError) as cm:
                read_records(p, encoding="nosuchcodec")
            self.assertIsInstance(cm.exception.cause, LookupError)


if __name__ == "__main__":
    unittest.main(verbosity=2)
