import argparse
import logging
import sys

import unidecode

from lexistem import config, vocabulary
from lexistem.errors import StemmerError
from lexistem.porter2 import Stemmer, version


def normalize(text):
    """Folds raw input to the lowercase ASCII the stemmer expects."""
    return unidecode.unidecode(text).lower()


def iter_words(args, stream):
    if args:
        for arg in args:
            yield from normalize(arg).split()
        return
    for line in stream:
        yield from normalize(line).split()


def stem_command(args, stdin=None, stdout=None):
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stemmer = Stemmer(cache_size=args.cache_size)
    for word in iter_words(args.words, stdin):
        if args.show_word:
            print('{}\t{}'.format(word, stemmer.stemWord(word)), file=stdout)
        else:
            print(stemmer.stemWord(word), file=stdout)
    return 0


def check_command(args, stdout=None):
    stdout = stdout or sys.stdout
    if args.download:
        voc_path, out_path = vocabulary.download_vocabulary(args.data_dir)
    else:
        if not args.vocabulary or not args.output:
            raise StemmerError('Provide VOCABULARY and OUTPUT files, or use --download')
        voc_path, out_path = args.vocabulary, args.output

    pairs = vocabulary.load_vocabulary(voc_path, out_path)
    stemmer = Stemmer(cache_size=0)
    mismatches = vocabulary.compare(stemmer.stemWord, pairs)
    for word, expected, actual in mismatches[:args.limit]:
        print('{}: expected {}, got {}'.format(word, expected, actual), file=stdout)
    print('{} of {} words stemmed as expected'.format(len(pairs) - len(mismatches), len(pairs)), file=stdout)
    return 1 if mismatches else 0


def build_parser():
    parser = argparse.ArgumentParser(prog='lexistem', description='Porter2 stemmer for English words')
    parser.add_argument('--version', action='version', version='%(prog)s ' + version())
    parser.add_argument('-v', '--verbose', action='store_true', help='Log debug messages')
    commands = parser.add_subparsers(dest='command')
    commands.required = True

    stem_parser = commands.add_parser('stem', help='Stem words from arguments or STDIN')
    stem_parser.add_argument('words', nargs='*', help='Words to stem (default: read STDIN)')
    stem_parser.add_argument('--cache-size', type=int, default=None,
                             help='Stem cache size (default: LEXISTEM_CACHE_SIZE or {})'.format(
                                 config.DEFAULT_CACHE_SIZE))
    stem_parser.add_argument('-w', '--show-word', action='store_true', help='Print each word next to its stem')
    stem_parser.set_defaults(func=stem_command)

    check_parser = commands.add_parser('check', help='Compare stems with a reference vocabulary')
    check_parser.add_argument('vocabulary', nargs='?', help='File with one word per line')
    check_parser.add_argument('output', nargs='?', help='File with the expected stem per line')
    check_parser.add_argument('--download', action='store_true', help='Download the Snowball reference vocabulary')
    check_parser.add_argument('--data-dir', default=None, help='Where to store downloaded files')
    check_parser.add_argument('--limit', type=int, default=50, help='Maximum number of mismatches to print')
    check_parser.set_defaults(func=check_command)
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else config.log_level(),
                        format='%(levelname)s %(name)s: %(message)s')
    try:
        return args.func(args)
    except StemmerError as e:
        print('lexistem: {}'.format(e), file=sys.stderr)
        return 2


if __name__ == '__main__':
    sys.exit(main())
