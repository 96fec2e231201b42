"""Revision (branch or commit) models."""

from enum import Enum

from pydantic import BaseModel


class HeadKind(str, Enum):
    """What a head value refers to."""

    BRANCH = "branch"
    SHA = "sha"


class Head(BaseModel):
    """A branch name or commit hash used in provider URLs."""

    kind: HeadKind
    value: str

    class Config:
        frozen = True

    @property
    def is_branch(self) -> bool:
        return self.kind is HeadKind.BRANCH


def create_branch(value: str) -> Head:
    return Head(kind=HeadKind.BRANCH, value=value)


def create_sha(value: str) -> Head:
    return Head(kind=HeadKind.SHA, value=value)
