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

from dataclasses import dataclass

DIFF_MARKER_PREFIX = "diff --git"


@dataclass(frozen=True)
class Diff:
    # right_path is the post-change path and the identity of the changeset.
    left_path: str
    right_path: str

    @property
    def path(self) -> str:
        return self.right_path

    @property
    def is_rename(self) -> bool:
        return self.left_path != self.right_path


def parse_diff_marker(line: str) -> Diff | None:
    """
    Extract the a/ and b/ paths from a `diff --git a/<left> b/<right>` line.

    The right path runs from the last " b/" to the end of the line. Returns
    None when the anchors cannot be located, or when " b/" comes before "a/".
    """
    if not line.startswith(DIFF_MARKER_PREFIX):
        return None

    a_index = line.find("a/", len(DIFF_MARKER_PREFIX))
    b_index = line.rfind(" b/")
    if a_index == -1 or b_index == -1 or b_index < a_index:
        return None

    left_path = line[a_index + 2 : b_index].strip()
    right_path = line[b_index + 3 :].strip()
    if not right_path:
        return None

    return Diff(left_path=left_path, right_path=right_path)
