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

FIRST_HASH = "1" * 40
SECOND_HASH = "abcdef0123456789abcdef0123456789abcdef01"

TWO_COMMIT_PATCH = f"""\
From {FIRST_HASH} Mon Sep 17 00:00:00 2001
From: Jane Doe <jane@example.com>
Date: Tue, 3 Jan 2023 10:00:00 +0000
Subject: [PATCH 1/2] Add name column

---
 src/dbo/Table.sql | 3 ++-
 readme.md         | 1 +
 2 files changed, 3 insertions(+), 1 deletion(-)

diff --git a/src/dbo/Table.sql b/src/dbo/Table.sql
index 0000000..1111111 100644
--- a/src/dbo/Table.sql
+++ b/src/dbo/Table.sql
@@ -1,3 +1,4 @@
 CREATE TABLE Foo (
-    Id INT
+    Id INT NOT NULL,
+    Name NVARCHAR(50)
 )
diff --git a/readme.md b/readme.md
index 2222222..3333333 100644
--- a/readme.md
+++ b/readme.md
@@ -1 +1,2 @@
 # Project
+hello
From {SECOND_HASH} Mon Sep 17 00:00:00 2001
From: John Roe <john@example.com>
Date: Wed, 4 Jan 2023 11:30:00 +0000
Subject: [PATCH 2/2] Add view

---
diff --git a/src/dbo/Views/Active.sql b/src/dbo/Views/Active.sql
new file mode 100644
index 0000000..4444444
--- /dev/null
+++ b/src/dbo/Views/Active.sql
@@ -0,0 +1,2 @@
+CREATE VIEW Active AS
+SELECT * FROM Foo
"""


@pytest.fixture
def two_commit_patch() -> str:
    return TWO_COMMIT_PATCH


@pytest.fixture
def isolated_log_dir(tmp_path, monkeypatch):
    log_dir = tmp_path / "logs"
    monkeypatch.setattr("patchaudit.constants.LOG_DIR", log_dir)
    return log_dir
