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

from collections.abc import Iterator

from loguru import logger

from patchaudit.core.assembly.changeset_assembler import ChangesetAssembler
from patchaudit.core.data.changeset import Changeset
from patchaudit.core.data.text_region import TextRegion
from patchaudit.core.filtering.path_filter import PathFilter
from patchaudit.core.parsing.commit_segmenter import CommitSegmenter
from patchaudit.core.parsing.diff_segmenter import DiffSegmenter
from patchaudit.core.parsing.line_classifier import LineClassifier


class ExtractPipeline:
    """
    Turns patch text into filtered per-file Changesets.

    Two configurations are supported:

    1. With commit attribution: the text is split into commits, each commit
       into file regions, and every Changeset references its commit Header.
    2. Without commit attribution: every line of the text is classified in one
       stream and split into files on diff markers and commit headers, the
       same boundaries the segmenters use; Changesets have no header.

    Both are lazy; the caller must keep `text` alive while consuming the result.
    """

    def __init__(
        self,
        path_filter: PathFilter,
        commit_attribution: bool = True,
        assembler: ChangesetAssembler | None = None,
        classifier: LineClassifier | None = None,
    ):
        self.path_filter = path_filter
        self.commit_attribution = commit_attribution
        self.assembler = assembler or ChangesetAssembler()
        self.classifier = classifier or LineClassifier()
        self.commit_segmenter = CommitSegmenter()
        self.diff_segmenter = DiffSegmenter()

    def run(self, text: str) -> Iterator[Changeset]:
        if self.commit_attribution:
            return self.path_filter.filter(self._attributed_changesets(text))
        return self._unattributed_changesets(text)

    def _attributed_changesets(self, text: str) -> Iterator[Changeset]:
        for header, commit_region in self.commit_segmenter.segments(text):
            produced = 0
            for diff, diff_region in self.diff_segmenter.segments(commit_region):
                events = self.classifier.classify_lines(diff_region.lines())
                yield self.assembler.assemble(header, diff, events)
                produced += 1

            if not produced:
                logger.debug(f"Commit {header.short_hash} has no file diffs")

    def _unattributed_changesets(self, text: str) -> Iterator[Changeset]:
        events = self.classifier.classify_stream(TextRegion.whole(text).lines())
        for diff, line_events in self.path_filter.filter_events(events):
            yield self.assembler.assemble(None, diff, line_events)

