import os
import tempfile
from unittest import TestCase, mock

import requests

from lexistem import vocabulary
from lexistem.errors import StemmerError, VocabularyError
from lexistem.porter2 import stem


def write(path, lines):
    with open(path, 'w', encoding='utf-8') as f:
        f.write('\n'.join(lines) + '\n')


class TestLoadVocabulary(TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.voc = os.path.join(self.tmp.name, 'voc.txt')
        self.out = os.path.join(self.tmp.name, 'output.txt')

    def tearDown(self):
        self.tmp.cleanup()

    def test_pairs(self):
        write(self.voc, ['knitting', 'knots', ''])
        write(self.out, ['knit', 'knot'])
        self.assertEqual(vocabulary.load_vocabulary(self.voc, self.out),
                         [('knitting', 'knit'), ('knots', 'knot')])

    def test_length_mismatch(self):
        write(self.voc, ['knitting', 'knots'])
        write(self.out, ['knit'])
        with self.assertRaises(VocabularyError):
            vocabulary.load_vocabulary(self.voc, self.out)

    def test_missing_file(self):
        with self.assertRaises(StemmerError):
            vocabulary.load_vocabulary(self.voc, self.out)

    def test_compare(self):
        pairs = [('knitting', 'knit'), ('knots', 'knots')]
        self.assertEqual(vocabulary.compare(stem, pairs), [('knots', 'knots', 'knot')])


class TestDownloadVocabulary(TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tmp.cleanup()

    def response(self, body):
        response = mock.Mock()
        response.iter_content.return_value = [body]
        return response

    @mock.patch('lexistem.vocabulary.requests.get')
    def test_downloads_both_files(self, get):
        get.side_effect = [self.response(b'knots\n'), self.response(b'knot\n')]
        voc, out = vocabulary.download_vocabulary(self.tmp.name, 'http://example.com/english/')

        self.assertEqual(get.call_args_list[0][0][0], 'http://example.com/english/voc.txt')
        self.assertEqual(get.call_args_list[1][0][0], 'http://example.com/english/output.txt')
        self.assertEqual(vocabulary.load_vocabulary(voc, out), [('knots', 'knot')])

    @mock.patch('lexistem.vocabulary.requests.get')
    def test_uses_existing_files(self, get):
        write(os.path.join(self.tmp.name, 'voc.txt'), ['knots'])
        write(os.path.join(self.tmp.name, 'output.txt'), ['knot'])
        vocabulary.download_vocabulary(self.tmp.name, 'http://example.com')
        get.assert_not_called()

    @mock.patch('lexistem.vocabulary.requests.get')
    def test_download_error(self, get):
        get.side_effect = requests.ConnectionError('offline')
        with self.assertRaises(VocabularyError):
            vocabulary.download_vocabulary(self.tmp.name, 'http://example.com')

    @mock.patch('lexistem.vocabulary.requests.get')
    def test_data_dir_from_environment(self, get):
        get.side_effect = [self.response(b'a\n'), self.response(b'a\n')]
        data_dir = os.path.join(self.tmp.name, 'nested')
        with mock.patch.dict('os.environ', {'LEXISTEM_DATA_DIR': data_dir,
                                            'LEXISTEM_VOCABULARY_URL': 'http://mirror.test/'}):
            voc, out = vocabulary.download_vocabulary()
        self.assertEqual(os.path.dirname(voc), data_dir)
        self.assertEqual(get.call_args_list[0][0][0], 'http://mirror.test/voc.txt')

    @mock.patch('lexistem.vocabulary.requests.get')
    def test_interrupted_download_is_fetched_again(self, get):
        def interrupted(chunk_size):
            yield b'knitting\nkno'
            raise requests.exceptions.ChunkedEncodingError('connection reset')

        broken = mock.Mock()
        broken.iter_content.side_effect = interrupted
        get.side_effect = [broken]
        with self.assertRaises(VocabularyError):
            vocabulary.download_vocabulary(self.tmp.name, 'http://x')
        self.assertEqual(os.listdir(self.tmp.name), [])

        get.reset_mock()
        get.side_effect = [self.response(b'knitting\nknots\n'), self.response(b'knit\nknot\n')]
        voc, out = vocabulary.download_vocabulary(self.tmp.name, 'http://x')
        self.assertEqual([call[0][0] for call in get.call_args_list],
                         ['http://x/voc.txt', 'http://x/output.txt'])
        self.assertEqual(vocabulary.load_vocabulary(voc, out), [('knitting', 'knit'), ('knots', 'knot')])
