"""Tests for the CLI utilities."""

import io
import os
import random
import shutil
import sys
import tempfile
import unittest
from contextlib import redirect_stdout

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from cli import WordFindCLI, SAMPLE_WORDS
from wordfind.config import load_config
from wordfind.lexicon import load_words
from wordfind.runner import run


class TestWordFindCLI(unittest.TestCase):
    """Tests for sample files, validation and verification."""

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.cli = WordFindCLI()

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def quietly(self, func, *args):
        with redirect_stdout(io.StringIO()) as out:
            result = func(*args)
        return result, out.getvalue()

    def write_file(self, name, text):
        path = os.path.join(self.test_dir, name)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(text)
        return path

    def test_create_sample_files(self):
        data_dir = os.path.join(self.test_dir, "data")
        self.quietly(self.cli.create_sample_files, data_dir)

        config = load_config(os.path.join(data_dir, "config.yaml"))
        self.assertEqual(config['words_file'], os.path.join(data_dir, "words.txt"))
        self.assertEqual(config['grid']['size'], 20)
        self.assertEqual(load_words(config['words_file']), SAMPLE_WORDS)

    def test_validate_good_wordlist(self):
        path = self.write_file("words.txt", "ALPHA\nBRAVO\nCHARLIE\n")
        ok, out = self.quietly(self.cli.validate_wordlist, path, 20)

        self.assertTrue(ok)
        self.assertIn("Total words: 3", out)
        self.assertIn("well-formed", out)

    def test_validate_reports_problems(self):
        path = self.write_file("words.txt", "ALPHA\nBRAVISSIMO\n\nalpha\n")
        ok, out = self.quietly(self.cli.validate_wordlist, path, 5)

        self.assertFalse(ok)
        self.assertIn("BRAVISSIMO is too long to fit in a 5 x 5 puzzle", out)
        self.assertIn("1 empty lines", out)
        self.assertIn("ALPHA appears more than once", out)

    def test_validate_missing_file(self):
        ok, _ = self.quietly(self.cli.validate_wordlist, os.path.join(self.test_dir, "none.txt"), 20)
        self.assertFalse(ok)

    def test_verify_generated_answer_key(self):
        config = load_config()
        config['words_file'] = self.write_file("words.txt", "\n".join(SAMPLE_WORDS) + "\n")
        config['export']['output_dir'] = self.test_dir
        config['grid']['hard'] = True
        run(config, rng=random.Random(31))

        ok, out = self.quietly(self.cli.verify_puzzle, os.path.join(self.test_dir, "answer_key.csv"))

        self.assertTrue(ok)
        self.assertIn(f"Verified {len(SAMPLE_WORDS)}/{len(SAMPLE_WORDS)} words", out)

    def test_verify_reports_missing_word(self):
        path = self.write_file("answer_key.csv", ",,,C,A,T\n,,, , , \n,,, , , \n\n\n\n,,,CAT,,,DOG\n")
        ok, out = self.quietly(self.cli.verify_puzzle, path)

        self.assertFalse(ok)
        self.assertIn("DOG not found", out)


if __name__ == '__main__':
    unittest.main()
