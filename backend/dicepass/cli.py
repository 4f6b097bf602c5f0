"""
Command line entry point - generate passphrases, warm the cache, or serve
"""

import argparse
import sys
from typing import List, Optional

from dicepass.config import settings, validate_settings
from dicepass.errors import ConfigurationError, MissingWord, WordListUnavailable
from dicepass.logging_config import setup_logging
from dicepass.services.generator import GenerationRequest, PassphraseGenerator
from dicepass.services.wordlist import WordListCache, load_wordlist


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dicepass",
        description="Generate diceware passphrases",
    )
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log progress to stderr")
    # Also accepted after the command; SUPPRESS keeps an earlier -v
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-v", "--verbose", action="store_true", default=argparse.SUPPRESS,
                        help="Log progress to stderr")
    commands = parser.add_subparsers(dest="command")

    generate = commands.add_parser("generate", parents=[common],
                                   help="Print passphrases (default)")
    add_generate_arguments(generate)

    fetch = commands.add_parser("fetch", parents=[common], help="Download the wordlist into the cache")
    fetch.add_argument("--refresh", action="store_true",
                       help="Download again even if a cached copy exists")

    serve = commands.add_parser("serve", parents=[common], help="Run the HTTP service")
    serve.add_argument("--host", default=settings.BACKEND_HOST)
    serve.add_argument("--port", type=int, default=settings.BACKEND_PORT)

    return parser


def add_generate_arguments(parser: argparse.ArgumentParser):
    parser.add_argument("-m", "--min-chars", type=int, default=settings.DEFAULT_MIN_CHARS,
                        help=f"Minimum passphrase length (default: {settings.DEFAULT_MIN_CHARS})")
    parser.add_argument("-n", "--quantity", type=int, default=settings.DEFAULT_QUANTITY,
                        help=f"Number of passphrases (default: {settings.DEFAULT_QUANTITY})")
    parser.add_argument("-c", "--complex", dest="complex_mode", action="store_true",
                        help="Title-case words, replace spaces with symbols, inject a digit")
    parser.add_argument("--complex-chars", default=settings.COMPLEX_CHARS,
                        help="Characters used to replace spaces in complex mode")
    parser.add_argument("-w", "--wordlist",
                        help="Read this local wordlist instead of the cached download")
    parser.add_argument("--refresh", action="store_true",
                        help="Download the wordlist again before generating")


def error(message: str) -> int:
    print(f"[DICEPASS] ERROR: {message}", file=sys.stderr)
    return 1


def run_generate(args) -> int:
    # Parameters are checked before the wordlist is touched
    request = GenerationRequest(
        min_chars=args.min_chars,
        quantity=args.quantity,
        complex_mode=args.complex_mode,
        complex_chars=args.complex_chars,
    )

    if args.wordlist:
        wordlist = load_wordlist(args.wordlist)
    else:
        wordlist = WordListCache.from_settings(settings).load(refresh=args.refresh)

    for passphrase in PassphraseGenerator(wordlist).generate(request):
        print(passphrase)
    return 0


def run_fetch(args) -> int:
    cache = WordListCache.from_settings(settings)
    wordlist = cache.load(refresh=args.refresh)
    print(f"[DICEPASS] Wordlist cached at {cache.path} ({len(wordlist)} entries)")
    if not wordlist.is_complete:
        print(f"[DICEPASS] Warning: {len(wordlist.missing_codes())} roll codes have no word")
    return 0


def run_serve(args) -> int:
    import uvicorn
    from dicepass.main import create_app

    uvicorn.run(create_app(), host=args.host, port=args.port)
    return 0


COMMANDS = ("generate", "fetch", "serve")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    argv = list(sys.argv[1:] if argv is None else argv)
    # "generate" is the default command
    if not any(arg in COMMANDS for arg in argv) and argv[:1] not in (["-h"], ["--help"]):
        argv = ["generate"] + argv

    args = build_parser().parse_args(argv)

    if args.verbose:
        # stdout carries the passphrases
        setup_logging(settings.LOG_LEVEL, stream=sys.stderr)

    commands = {
        "generate": run_generate,
        "fetch": run_fetch,
        "serve": run_serve,
    }

    try:
        validate_settings(settings)
        return commands[args.command](args)
    except ConfigurationError as e:
        return error(str(e))
    except WordListUnavailable as e:
        return error(str(e))
    except MissingWord as e:
        return error(f"{e} - the wordlist is incomplete, try --refresh")


if __name__ == "__main__":
    sys.exit(main())
