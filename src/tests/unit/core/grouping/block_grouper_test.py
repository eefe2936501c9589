# -----------------------------------------------------------------------------
# /*
#  * Copyright (C) 2025 CodeStory
#  *
#  * This program is free software; you can redistribute it and/or modify
#  * it under the terms of the GNU General Public License as published by
#  * the Free Software Foundation; Version 2.
#  *
#  * This program is distributed in the hope that it will be useful,
#  * but WITHOUT ANY WARRANTY; without even the implied warranty of
#  * MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
#  * GNU General Public License for more details.
#  *
#  * You should have received a copy of the GNU General Public License
#  * along with this program; if not, you can contact us at support@codestory.build
#  */
# -----------------------------------------------------------------------------

import pytest

from patchaudit.constants import GARBLED_BOM
from patchaudit.core.data.diff import Diff
from patchaudit.core.data.events import (
    Addition,
    CommitEvent,
    Deletion,
    DiffEvent,
    EventKind,
    FileBoundary,
)
from patchaudit.core.exceptions import SegmentationError
from patchaudit.core.grouping.block_grouper import BlockGrouper


@pytest.fixture
def grouper():
    return BlockGrouper()


def lines_of(blocks):
    return [block.lines for block in blocks]


def test_consecutive_lines_share_a_block(grouper):
    additions, deletions = grouper.group(
        [Addition("foo"), Addition("bar"), Deletion("baz")]
    )

    assert lines_of(additions) == [["foo", "bar"]]
    assert lines_of(deletions) == [["baz"]]
    assert all(block.kind == EventKind.ADDITION for block in additions)
    assert all(block.kind == EventKind.DELETION for block in deletions)


def test_interleaving_produces_separate_blocks(grouper):
    events = [
        Deletion("old 1"),
        Addition("new 1"),
        Addition("new 2"),
        Deletion("old 2"),
        Deletion("old 3"),
        Addition("new 3"),
    ]

    additions, deletions = grouper.group(events)

    assert lines_of(additions) == [["new 1", "new 2"], ["new 3"]]
    assert lines_of(deletions) == [["old 1"], ["old 2", "old 3"]]


def test_empty_stream(grouper):
    assert grouper.group([]) == ([], [])


def test_garbled_bom_is_dropped(grouper):
    additions, deletions = grouper.group(
        [Addition(GARBLED_BOM), Addition("CREATE TABLE Foo"), Deletion(GARBLED_BOM)]
    )

    assert lines_of(additions) == [["CREATE TABLE Foo"]]
    assert deletions == []


def test_garbled_bom_does_not_split_a_block(grouper):
    additions, _ = grouper.group([Addition("a"), Addition(GARBLED_BOM), Addition("b")])

    assert lines_of(additions) == [["a", "b"]]


def test_only_bom_yields_no_blocks(grouper):
    assert grouper.group([Addition(GARBLED_BOM)]) == ([], [])


def test_bom_prefixed_content_is_kept(grouper):
    additions, _ = grouper.group([Addition(GARBLED_BOM + "CREATE")])

    assert lines_of(additions) == [[GARBLED_BOM + "CREATE"]]


def test_diff_event_is_an_invariant_violation(grouper):
    with pytest.raises(SegmentationError):
        grouper.group([Addition("a"), DiffEvent(Diff("x", "x"))])


def test_file_boundary_is_an_invariant_violation(grouper):
    with pytest.raises(SegmentationError):
        grouper.group([Addition("a"), FileBoundary()])


def test_commit_events_are_skipped(grouper):
    additions, _ = grouper.group([Addition("a"), CommitEvent("c" * 40), Addition("b")])

    assert lines_of(additions) == [["a", "b"]]
