"""Tests for directory-level processing."""

import pytest

from cobradocs.config import default_config
from cobradocs.errors import ConfigurationError
from cobradocs.pipeline import check_config, check_directories, clean_target, plan_documents, run


STEMS = ["oasisctl", "oasisctl_list", "oasisctl_list_apikeys", "oasisctl_get", "oasisctl_get_cluster"]


class TestCheckDirectories:

    def test_same_directory(self, tmp_path):
        with pytest.raises(ConfigurationError, match="same"):
            check_directories(tmp_path, tmp_path / "sub" / "..")

    def test_missing_source(self, tmp_path):
        with pytest.raises(ConfigurationError, match="does not exist"):
            check_directories(tmp_path / "missing", tmp_path)

    def test_missing_target(self, tmp_path):
        with pytest.raises(ConfigurationError, match="does not exist"):
            check_directories(tmp_path, tmp_path / "missing")

    def test_valid(self, docs_dirs):
        source, target = docs_dirs
        assert check_directories(source, target) == (source, target)


class TestPlanDocuments:

    def test_collision_rejected(self, docs_dirs, write_docs):
        source, target = docs_dirs
        write_docs(source, ["oasisctl_get_cluster", "oasisctl_get-cluster"])

        with pytest.raises(ConfigurationError, match="same output file"):
            plan_documents(source, target, "oasisctl")

    def test_sorted_records(self, docs_dirs, write_docs):
        source, target = docs_dirs
        write_docs(source, STEMS)

        records = plan_documents(source, target, "oasisctl")

        assert [r.input_path.stem for r in records] == [
            "oasisctl", "oasisctl_get", "oasisctl_get_cluster", "oasisctl_list", "oasisctl_list_apikeys",
        ]


class TestRun:

    def test_rewrites_and_yields_navigation(self, docs_dirs, write_docs):
        source, target = docs_dirs
        write_docs(source, STEMS)

        blocks = list(run(source, target, default_config()))

        assert "\n".join(blocks) + "\n" == (
            "    - text: Options\n"
            "      href: oasisctl-options.html\n"
            "    - text: Get\n"
            "      href: oasisctl-get.html\n"
            "      children:\n"
            "        - text: Get Cluster\n"
            "          href: oasisctl-get-cluster.html\n"
            "    - text: List\n"
            "      href: oasisctl-list.html\n"
            "      children:\n"
            "        - text: List API Keys\n"
            "          href: oasisctl-list-apikeys.html\n"
        )
        assert sorted(p.name for p in target.iterdir()) == [
            "oasisctl-get-cluster.md",
            "oasisctl-get.md",
            "oasisctl-list-apikeys.md",
            "oasisctl-list.md",
            "oasisctl-options.md",
        ]

        root = (target / "oasisctl-options.md").read_text(encoding="utf-8")
        assert "title: ArangoDB Oasis Shell oasisctl\n" in root
        assert "# Oasisctl\n" in root
        assert "## See also\n" in root
        assert "Auto generated" not in root

        child = (target / "oasisctl-list-apikeys.md").read_text(encoding="utf-8")
        assert "title: oasisctl list apikeys\n" in child
        assert "# Oasisctl List Apikeys\n" in child
        assert "[oasisctl](oasisctl-options.html)" in child

    def test_writes_incrementally(self, docs_dirs, write_docs):
        source, target = docs_dirs
        write_docs(source, ["oasisctl", "oasisctl_list"])

        blocks = run(source, target, default_config())
        assert list(target.iterdir()) == []

        next(blocks)
        assert [p.name for p in target.iterdir()] == ["oasisctl-options.md"]

    def test_dry_run_writes_nothing(self, docs_dirs, write_docs):
        source, target = docs_dirs
        write_docs(source, STEMS)

        blocks = list(run(source, target, default_config(), dry_run=True))

        assert len(blocks) == len(STEMS)
        assert list(target.iterdir()) == []

    def test_rerun_is_byte_identical(self, docs_dirs, write_docs):
        source, target = docs_dirs
        write_docs(source, STEMS)

        first_nav = list(run(source, target, default_config()))
        first = {p.name: p.read_bytes() for p in target.iterdir()}
        second_nav = list(run(source, target, default_config()))
        second = {p.name: p.read_bytes() for p in target.iterdir()}

        assert first_nav == second_nav
        assert first == second

    def test_configuration_error_before_any_write(self, docs_dirs, write_docs):
        source, target = docs_dirs
        write_docs(source, ["oasisctl", "oasisctl_options"])

        with pytest.raises(ConfigurationError):
            run(source, target, default_config())
        assert list(target.iterdir()) == []

    def test_title_overrides_from_config(self, docs_dirs, write_docs):
        source, target = docs_dirs
        write_docs(source, ["oasisctl_db"])
        config = default_config()
        config["title_overrides"] = {"db": "Database"}

        assert list(run(source, target, config)) == [
            "    - text: Database\n      href: oasisctl-db.html",
        ]

    def test_clean_removes_stale_output(self, docs_dirs, write_docs):
        source, target = docs_dirs
        write_docs(source, ["oasisctl", "oasisctl_list"])
        (target / "oasisctl-removed-command.md").write_text("old", encoding="utf-8")
        (target / "oasisctl-getting-started.md").write_text("keep", encoding="utf-8")
        (target / "index.md").write_text("keep", encoding="utf-8")

        list(run(source, target, default_config(), clean=True))

        assert sorted(p.name for p in target.iterdir()) == [
            "index.md",
            "oasisctl-getting-started.md",
            "oasisctl-list.md",
            "oasisctl-options.md",
        ]


class TestCleanTarget:

    def test_dry_run_keeps_files(self, tmp_path):
        stale = tmp_path / "tool-old.md"
        stale.write_text("old", encoding="utf-8")

        removed = clean_target(tmp_path, "tool", dry_run=True)

        assert removed == [stale]
        assert stale.exists()

    def test_keep_list(self, tmp_path):
        (tmp_path / "tool-old.md").write_text("old", encoding="utf-8")
        (tmp_path / "tool-guide.md").write_text("keep", encoding="utf-8")

        removed = clean_target(tmp_path, "tool", keep=["tool-guide.md"])

        assert [p.name for p in removed] == ["tool-old.md"]
        assert [p.name for p in tmp_path.iterdir()] == ["tool-guide.md"]


class TestCheckConfig:

    def test_defaults_pass(self):
        check_config(default_config())

    @pytest.mark.parametrize("key, value", [
        ("title_overrides", ["db"]),
        ("prefix", None),
        ("nav_indent", 4),
        ("keep_files", "oasisctl-getting-started.md"),
        ("title", None),
    ])
    def test_wrong_type_names_key(self, key, value):
        config = default_config()
        config[key] = value
        with pytest.raises(ConfigurationError, match=key):
            check_config(config)

    def test_empty_prefix(self):
        config = default_config()
        config["prefix"] = ""
        with pytest.raises(ConfigurationError, match="prefix"):
            check_config(config)

    def test_non_string_override_title(self):
        config = default_config()
        config["title_overrides"] = {"db": 1}
        with pytest.raises(ConfigurationError, match="'db'"):
            check_config(config)

    def test_run_checks_before_touching_files(self, docs_dirs, write_docs):
        source, target = docs_dirs
        write_docs(source, ["oasisctl"])
        config = default_config()
        config["nav_indent"] = None

        with pytest.raises(ConfigurationError, match="nav_indent"):
            run(source, target, config)
        assert list(target.iterdir()) == []
