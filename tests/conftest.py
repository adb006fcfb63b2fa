import sys
from pathlib import Path

import pytest

# Add src to path for imports
repo_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(repo_root / "src"))


@pytest.fixture
def home(tmp_path, monkeypatch):
    """Isolated home directory so ~/.cobradocs/config.json is per test."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    return home_dir


@pytest.fixture
def docs_dirs(tmp_path):
    """Empty (source, target) directory pair."""
    source = tmp_path / "generated"
    target = tmp_path / "site"
    source.mkdir()
    target.mkdir()
    return source, target


ROOT_DOC = """\
---
description: Command-line client tool for managing ArangoDB Oasis
layout: default
title: oasisctl
---
## oasisctl

ArangoDB Oasis

### Synopsis

ArangoDB Oasis Command Line Client

### Options

```
  -h, --help   help for oasisctl
```

### SEE ALSO

* [oasisctl list](oasisctl-list.html)	 - List resources

###### Auto generated by spf13/cobra on 18-Jan-2021
"""


def command_doc(command: str) -> str:
    return f"""\
---
description: {command}
layout: default
title: {command}
---
## {command}

{command}

### SEE ALSO

* [oasisctl](oasisctl.html)	 - ArangoDB Oasis

###### Auto generated by spf13/cobra on 18-Jan-2021
"""


def write_docs(source: Path, stems):
    for stem in stems:
        if stem == "oasisctl":
            content = ROOT_DOC
        else:
            content = command_doc(stem.replace("_", " "))
        (source / f"{stem}.md").write_text(content, encoding="utf-8")


@pytest.fixture(name="write_docs")
def write_docs_fixture():
    """Helper writing cobra-style files for the given stems."""
    return write_docs
