"""
SubFindr - Open Source Subdomain Enumeration Tool
Author: ha-2
GitHub: https://github.com/ha-2
License: CC BY-NC 4.0
"""

import re
from enum import Enum
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict


class ScanMethod(str, Enum):
    DICTIONARY = "dictionary"
    BRUTEFORCE = "bruteforce"
    ALL = "all"


class CandidateSource(str, Enum):
    DICTIONARY = "dictionary"
    BRUTEFORCE = "bruteforce"


class ResultMethod(str, Enum):
    DICTIONARY = "Dictionary"
    BRUTEFORCE = "Bruteforce"


def normalize_domain(domain: Optional[str]) -> str:
    """
    Reduce user input to a bare domain name.

    Strips surrounding whitespace, a leading http:// or https:// scheme,
    a leading "www." and any path. Returns an empty string when nothing
    usable is left.
    """
    if not domain:
        return ""
    domain = domain.strip().lower()
    domain = re.sub(r"^https?://", "", domain)
    if domain.startswith("www."):
        domain = domain[4:]
    return domain.split("/")[0]


class ScanRequest(BaseModel):
    domain: Optional[str] = None
    method: ScanMethod = ScanMethod.DICTIONARY


class Candidate(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    source: CandidateSource


class ProbeOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    active: bool
    address: Optional[str] = None


class ScanPlan(BaseModel):
    domain: str
    method: ScanMethod
    candidates: List[Candidate]


class ScanProgress(BaseModel):
    current: int
    total: int


class ScanResult(BaseModel):
    subdomain: str
    ip: Optional[str] = None
    status: Literal["active"] = "active"
    method: ResultMethod


class ProgressEvent(BaseModel):
    type: Literal["progress"] = "progress"
    progress: ScanProgress


class ResultEvent(BaseModel):
    type: Literal["result"] = "result"
    result: ScanResult


class CompleteEvent(BaseModel):
    type: Literal["complete"] = "complete"


ScanEvent = Union[ProgressEvent, ResultEvent, CompleteEvent]
