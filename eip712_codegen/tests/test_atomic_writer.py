"""
Tests for the atomic writer.
"""

from __future__ import annotations

import pytest

from eip712_codegen.pipeline import AtomicWriter, CodeWriteError, OutputConfig, OutputMode
from eip712_codegen.pipeline.analyzer import DocumentationPage

VALID_SOURCE = "pragma solidity ^0.8.23;\nlibrary TypesLib {\n}\nabstract contract Types {\n}\n"


class TestAtomicWriter:
    def test_write_creates_parents(self, tmp_path):
        path = tmp_path / "contracts" / "Types.sol"
        AtomicWriter().write(path, VALID_SOURCE)
        assert path.read_text() == VALID_SOURCE
        assert [p.name for p in path.parent.iterdir()] == ["Types.sol"]

    @pytest.mark.parametrize(
        "source, message",
        [
            ("library A {}\nabstract contract B {}\n", "pragma"),
            ("pragma solidity ^0.8.23;\nlibrary A {}\n", "library or contract"),
            ("pragma solidity ^0.8.23;\nlibrary A {\nabstract contract B {}\n", "unbalanced"),
        ],
    )
    def test_invalid_solidity_is_not_written(self, tmp_path, source, message):
        path = tmp_path / "Types.sol"
        path.write_text("// previous")
        with pytest.raises(CodeWriteError, match=message):
            AtomicWriter().write(path, source)
        assert path.read_text() == "// previous"
        assert [p.name for p in tmp_path.iterdir()] == ["Types.sol"]

    def test_markdown_is_not_validated(self, tmp_path):
        path = tmp_path / "page.md"
        AtomicWriter().write(path, "# {")
        assert path.read_text() == "# {"

    def test_custom_validator(self, tmp_path):
        seen = []
        AtomicWriter(validate_solidity=seen.append).write(tmp_path / "A.sol", "anything")
        assert seen == ["anything"]


class TestWriteOutput:
    def test_error_mode_refuses_existing_file(self, tmp_path):
        path = tmp_path / "Types.sol"
        path.write_text("// previous")
        with pytest.raises(FileExistsError):
            AtomicWriter().write_output(path, VALID_SOURCE, OutputConfig())
        assert path.read_text() == "// previous"

    def test_force_mode_overwrites(self, tmp_path):
        path = tmp_path / "Types.sol"
        path.write_text("// previous")
        AtomicWriter().write_output(path, VALID_SOURCE, OutputConfig(mode=OutputMode.FORCE))
        assert path.read_text() == VALID_SOURCE

    def test_documentation_is_written_under_docs_dir(self, tmp_path):
        pages = [DocumentationPage("/base-types/Mail.md", "# Mail"), DocumentationPage("/hash-getters/getMailHash.md", "# getMailHash")]
        docs = tmp_path / "docs"
        AtomicWriter().write_output(tmp_path / "Types.sol", VALID_SOURCE, OutputConfig(), pages, docs)
        assert (docs / "base-types" / "Mail.md").read_text() == "# Mail"
        assert (docs / "hash-getters" / "getMailHash.md").read_text() == "# getMailHash"

    def test_documentation_needs_docs_dir(self, tmp_path):
        pages = [DocumentationPage("/base-types/Mail.md", "# Mail")]
        AtomicWriter().write_output(tmp_path / "Types.sol", VALID_SOURCE, OutputConfig(), pages)
        assert [p.name for p in tmp_path.iterdir()] == ["Types.sol"]

    def test_non_atomic_write_still_validates(self, tmp_path):
        output = OutputConfig(atomic_write=False)
        with pytest.raises(CodeWriteError):
            AtomicWriter().write_output(tmp_path / "Types.sol", "contract A {}", output)
        AtomicWriter().write_output(tmp_path / "Types.sol", VALID_SOURCE, output)
        assert (tmp_path / "Types.sol").read_text() == VALID_SOURCE
