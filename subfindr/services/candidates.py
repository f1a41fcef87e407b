"""
SubFindr - Open Source Subdomain Enumeration Tool
Author: ha-2
GitHub: https://github.com/ha-2
License: CC BY-NC 4.0
"""

import itertools
import string
from typing import Iterator, List

from subfindr.schemas import Candidate, CandidateSource, ScanMethod
from subfindr.services.wordlist import DICTIONARY_WORDS

BRUTEFORCE_CHARS = string.ascii_lowercase + string.digits + "-"

DEFAULT_BRUTEFORCE_LIMIT = 150
DEFAULT_MAX_LENGTH = 3


def iter_bruteforce_labels(max_length: int = DEFAULT_MAX_LENGTH) -> Iterator[str]:
    """
    Lazily yield bruteforce labels, shortest first.

    One and two character labels use letters and digits (a hyphen is never
    allowed at either end). Three character labels are restricted to letters,
    with the last position limited to a-e, to keep the space small.
    """
    head_chars = BRUTEFORCE_CHARS.replace("-", "")

    if max_length >= 1:
        yield from head_chars

    if max_length >= 2:
        for first in head_chars:
            for second in BRUTEFORCE_CHARS:
                if second == "-":
                    continue
                yield first + second

    if max_length >= 3:
        letters = string.ascii_lowercase
        for first, second, third in itertools.product(letters, letters, letters[:5]):
            yield first + second + third


def generate_bruteforce(limit: int = DEFAULT_BRUTEFORCE_LIMIT,
                        max_length: int = DEFAULT_MAX_LENGTH) -> List[str]:
    """Return the first `limit` bruteforce labels"""
    return list(itertools.islice(iter_bruteforce_labels(max_length), limit))


def generate_candidates(method: ScanMethod,
                        limit: int = DEFAULT_BRUTEFORCE_LIMIT,
                        max_length: int = DEFAULT_MAX_LENGTH) -> List[Candidate]:
    """Build the ordered, deduplicated candidate list for a scan method"""
    method = ScanMethod(method)
    candidates: List[Candidate] = []
    seen = set()

    if method in (ScanMethod.DICTIONARY, ScanMethod.ALL):
        for word in DICTIONARY_WORDS:
            if word not in seen:
                seen.add(word)
                candidates.append(Candidate(label=word, source=CandidateSource.DICTIONARY))

    if method in (ScanMethod.BRUTEFORCE, ScanMethod.ALL):
        # Dictionary entries win over identical bruteforce labels
        for label in generate_bruteforce(limit, max_length):
            if label not in seen:
                seen.add(label)
                candidates.append(Candidate(label=label, source=CandidateSource.BRUTEFORCE))

    return candidates
