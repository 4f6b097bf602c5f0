"""
Diceware wordlist model and its local cache

The wordlist is fetched once from WORDLIST_URL into WORDLIST_DIR, then read
from disk. Lines look like "34521<whitespace>word"; anything else in the file
(PGP armor, blank lines, signatures) is skipped.
"""

import os
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Iterator, List, Mapping, Optional, Tuple, Union

import httpx

from dicepass.errors import MissingWord, WordListUnavailable
from dicepass.limits import WORDLIST_SIZE
from dicepass.logging_config import (
    log_duplicate_word_key,
    log_wordlist_fetched,
    log_wordlist_loaded,
    log_wordlist_unavailable,
)
from dicepass.services.dice import all_roll_codes, is_roll_code
from dicepass.services.telemetry import (
    WORDLIST_FAILURES,
    WORDLIST_FETCHES,
    increment_counter,
)


def parse_wordlist_lines(lines: Iterable[str]) -> Iterator[Tuple[str, str]]:
    """
    Split each line on its first whitespace run into (roll code, word).

    Lines whose first field is not a roll code, or that have no word, are
    skipped. The word keeps any internal spaces.
    """
    for line in lines:
        parts = line.strip().split(None, 1)
        if len(parts) != 2:
            continue
        key, value = parts
        if not is_roll_code(key):
            continue
        yield key, value.strip()


class WordList(Mapping[str, str]):
    """Immutable mapping from roll code to word"""

    def __init__(self, words: Mapping[str, str]):
        invalid = [code for code in words if not is_roll_code(code)]
        if invalid:
            raise ValueError(f"Invalid roll codes in wordlist: {', '.join(sorted(invalid)[:5])}")
        self._words = MappingProxyType(dict(words))

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, str]]) -> "WordList":
        """Build from (code, word) pairs; the first entry for a code wins"""
        words = {}
        for code, word in pairs:
            if code in words:
                log_duplicate_word_key(code)
                continue
            words[code] = word
        return cls(words)

    def __getitem__(self, code: str) -> str:
        return self._words[code]

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"WordList({len(self)} entries)"

    def lookup(self, code: str) -> str:
        """Word for a roll code; raises MissingWord when there is none"""
        try:
            return self._words[code]
        except KeyError:
            raise MissingWord(code) from None

    def missing_codes(self) -> List[str]:
        return [code for code in all_roll_codes() if code not in self._words]

    @property
    def is_complete(self) -> bool:
        return len(self._words) == WORDLIST_SIZE


def read_wordlist_pairs(path: Union[str, Path]) -> List[Tuple[str, str]]:
    """Read every (code, word) pair from a local wordlist file"""
    try:
        with open(path, "r", encoding="utf-8") as wordlist_file:
            return list(parse_wordlist_lines(wordlist_file))
    except (OSError, UnicodeDecodeError) as e:
        increment_counter(WORDLIST_FAILURES)
        log_wordlist_unavailable(str(path), str(e))
        raise WordListUnavailable(str(path), str(e)) from e


def load_wordlist(path: Union[str, Path]) -> WordList:
    """Load and check a local wordlist file"""
    wordlist = WordList.from_pairs(read_wordlist_pairs(path))
    if not wordlist:
        increment_counter(WORDLIST_FAILURES)
        log_wordlist_unavailable(str(path), "no wordlist entries found")
        raise WordListUnavailable(str(path), "no wordlist entries found")

    log_wordlist_loaded(str(path), len(wordlist), WORDLIST_SIZE - len(wordlist))
    return wordlist


class WordListCache:
    """Keeps a local copy of the remote wordlist"""

    def __init__(
        self,
        url: str,
        directory: Union[str, Path],
        filename: str = "diceware.wordlist.asc",
        timeout: float = 10.0,
        client: Optional[httpx.Client] = None,
    ):
        self.url = url
        self.directory = Path(directory).expanduser()
        self.filename = filename
        self.timeout = timeout
        self._client = client

    @classmethod
    def from_settings(cls, active_settings, client: Optional[httpx.Client] = None) -> "WordListCache":
        return cls(
            url=active_settings.WORDLIST_URL,
            directory=active_settings.wordlist_dir,
            filename=active_settings.WORDLIST_FILENAME,
            timeout=active_settings.WORDLIST_FETCH_TIMEOUT,
            client=client,
        )

    @property
    def path(self) -> Path:
        return self.directory / self.filename

    def exists(self) -> bool:
        return self.path.is_file() and self.path.stat().st_size > 0

    def ensure_local(self, refresh: bool = False) -> Path:
        """Download the wordlist unless a cached copy exists"""
        if self.exists() and not refresh:
            return self.path

        text = self._fetch()
        if next(parse_wordlist_lines(text.splitlines()), None) is None:
            # Keep captive-portal pages and the like out of the cache
            reason = "response contains no wordlist entries"
            increment_counter(WORDLIST_FAILURES)
            log_wordlist_unavailable(self.url, reason)
            raise WordListUnavailable(self.url, reason)

        tmp_path = self.path.with_name(self.filename + ".tmp")
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(text, encoding="utf-8")
            os.replace(tmp_path, self.path)
        except OSError as e:
            increment_counter(WORDLIST_FAILURES)
            log_wordlist_unavailable(str(self.path), str(e))
            raise WordListUnavailable(str(self.path), str(e)) from e

        increment_counter(WORDLIST_FETCHES)
        log_wordlist_fetched(self.url, str(self.path))
        return self.path

    def load(self, refresh: bool = False) -> WordList:
        return load_wordlist(self.ensure_local(refresh=refresh))

    def _fetch(self) -> str:
        try:
            if self._client is not None:
                response = self._client.get(
                    self.url, timeout=self.timeout, follow_redirects=True
                )
            else:
                with httpx.Client(timeout=self.timeout, follow_redirects=True) as client:
                    response = client.get(self.url)
            response.raise_for_status()
        except httpx.HTTPError as e:
            increment_counter(WORDLIST_FAILURES)
            log_wordlist_unavailable(self.url, str(e))
            raise WordListUnavailable(self.url, str(e)) from e
        return response.text
