"""
Unit tests for release validation areas.

Tests cover:
- ValidationArea / ValidationCheck models and their canonical JSON form
- Canonical file and directory I/O
- Claude sub-agent, Gemini command and Codex prompt rendering
- Reading rendered files back
- The validation CLI subcommand
"""

import json
import stat

import pytest
import tomli

from assistkit.adapters import (
    ClaudeValidationAdapter,
    CodexValidationAdapter,
    GeminiValidationAdapter,
    build_registries,
)
from assistkit.adapters.shared.frontmatter import split_frontmatter
from assistkit.adapters.shared.validation import area_title, split_sections
from assistkit.cli.main import main
from assistkit.core.canonical_models import (
    AREA_QA,
    AREA_SECURITY,
    CheckStatus,
    ConfigType,
    ValidationArea,
    ValidationCheck,
)
from assistkit.core.errors import AdapterNotFoundError, ParseError, ReadError
from assistkit.core.validation_io import (
    read_canonical_dir,
    read_canonical_file,
    write_areas_to_dir,
    write_canonical_file,
)


@pytest.fixture
def area():
    area = ValidationArea(
        name=AREA_QA,
        description="Quality gates for the release.",
        sign_off_criteria="All required checks pass.",
        instructions="Run every check from the repository root.",
    )
    area.add_check(ValidationCheck(name="tests", description="Unit tests pass",
                                   command="make test", required=True))
    area.add_check(ValidationCheck(name="todos", pattern="TODO|FIXME", file_pattern="**/*.py"))
    area.add_dependency("make")
    return area


@pytest.fixture
def registry():
    return build_registries()[ConfigType.VALIDATION]


class TestValidationModels:
    """Tests for the validation area models."""

    def test_check_status_values(self):
        assert [str(s) for s in CheckStatus] == ["GO", "NO-GO", "WARN", "SKIP"]

    def test_failure_status(self, area):
        required, optional = area.checks
        assert required.failure_status() is CheckStatus.NO_GO
        assert optional.failure_status() is CheckStatus.WARN
        assert area.required_checks() == [required]

    def test_builders(self):
        area = ValidationArea(name=AREA_SECURITY)
        area.add_tool("Read")
        area.add_tools("Grep", "Bash")
        area.add_skill("secrets")
        assert area.tools == ["Read", "Grep", "Bash"]
        assert area.skills == ["secrets"]

    def test_to_dict(self, area):
        data = area.to_dict()
        assert list(data) == ['name', 'description', 'sign_off_criteria', 'checks', 'dependencies', 'instructions']
        assert data['checks'][0] == {
            'name': 'tests', 'description': 'Unit tests pass', 'command': 'make test', 'required': True,
        }
        assert data['checks'][1] == {
            'name': 'todos', 'pattern': 'TODO|FIXME', 'file_pattern': '**/*.py', 'required': False,
        }

    def test_from_dict_round_trip(self, area):
        assert ValidationArea.from_dict(area.to_dict()) == area

    def test_from_dict_requires_name(self):
        with pytest.raises(KeyError):
            ValidationArea.from_dict({'description': 'x'})


class TestCanonicalFiles:
    """Tests for canonical area file I/O."""

    def test_write_and_read(self, area, tmp_path):
        path = tmp_path / "specs" / "qa.json"
        write_canonical_file(area, path)

        text = path.read_text()
        assert text.endswith("}\n")
        assert '\n  "name": "qa",' in text
        assert stat.S_IMODE(path.stat().st_mode) == 0o600

        restored = read_canonical_file(path)
        assert restored.checks == area.checks
        assert restored.source_format == 'canonical'

    def test_read_missing(self, tmp_path):
        with pytest.raises(ReadError):
            read_canonical_file(tmp_path / "nope.json")

    @pytest.mark.parametrize("content", ["{not json", "[]", '{"description": "no name"}'])
    def test_read_malformed(self, tmp_path, content):
        path = tmp_path / "bad.json"
        path.write_text(content)
        with pytest.raises(ParseError) as exc_info:
            read_canonical_file(path)
        assert exc_info.value.format == 'canonical'
        assert exc_info.value.path == str(path)

    def test_read_dir(self, tmp_path):
        for name in ("security", "qa"):
            write_canonical_file(ValidationArea(name=name), tmp_path / f"{name}.json")
        (tmp_path / "notes.md").write_text("ignored")
        (tmp_path / "nested.json").mkdir()

        assert [a.name for a in read_canonical_dir(tmp_path)] == ["qa", "security"]

    def test_read_missing_dir(self, tmp_path):
        with pytest.raises(ReadError):
            read_canonical_dir(tmp_path / "missing")

    def test_write_areas_to_dir(self, area, registry, tmp_path):
        paths = write_areas_to_dir([area, ValidationArea(name=AREA_SECURITY)], tmp_path / "out", registry, "gemini")
        assert [p.name for p in paths] == ["qa.toml", "security.toml"]
        assert all(p.exists() for p in paths)

    def test_write_areas_unknown_adapter(self, area, registry, tmp_path):
        with pytest.raises(AdapterNotFoundError):
            write_areas_to_dir([area], tmp_path, registry, "cursor")
        assert list(tmp_path.iterdir()) == []


class TestSections:
    """Tests for the shared document helpers."""

    def test_area_title(self):
        assert area_title("qa") == "Qa"
        assert area_title("release-notes") == "Release Notes"

    def test_split_sections_keeps_unknown_headings(self):
        body = "# Qa Validator\n\nIntro\n\n## Instructions\n\nStep one.\n\n## Notes\n\nStill instructions.\n"
        preamble, sections = split_sections(body)
        assert preamble == "Intro"
        assert sections == {"Instructions": "Step one.\n\n## Notes\n\nStill instructions."}


class TestClaudeValidationAdapter:
    """Tests for ClaudeValidationAdapter."""

    @pytest.fixture
    def adapter(self):
        return ClaudeValidationAdapter()

    def test_properties(self, adapter):
        assert adapter.config_type is ConfigType.VALIDATION
        assert adapter.default_dir == "agents"
        assert adapter.file_extension == ".md"

    def test_marshal(self, adapter, area):
        content = adapter.marshal(area).decode()
        fields, body = split_frontmatter(content)
        assert fields == {
            'name': 'qa-validator',
            'description': 'Qa validation agent for release readiness. Quality gates for the release.',
            'model': 'haiku',
            'tools': 'Read, Grep, Glob, Bash',
        }
        assert body.startswith("# Qa Validator\n\nQuality gates for the release.")
        for heading in ("## Sign-Off Criteria", "## Validation Checks", "## Dependencies",
                        "## Instructions", "## Reporting Format"):
            assert heading in body
        assert "| tests | Required | `make test` |" in body
        assert "| todos | Warning | `TODO|FIXME` |" in body
        assert "- `make`" in body
        assert "NO-GO" in body and "QA: GO" in body

    def test_explicit_model_tools_skills(self, adapter, area):
        area.model = "sonnet"
        area.add_tools("Read", "Bash")
        area.add_skill("testing")
        fields, _ = split_frontmatter(adapter.marshal(area).decode())
        assert fields['model'] == 'sonnet'
        assert fields['tools'] == 'Read, Bash'
        assert fields['skills'] == 'testing'

    def test_sections_omitted_when_empty(self, adapter):
        _, body = split_frontmatter(adapter.marshal(ValidationArea(name="docs")).decode())
        assert "## Sign-Off Criteria" not in body
        assert "## Validation Checks" not in body
        assert "## Reporting Format" in body

    def test_read_back(self, adapter, area, tmp_path):
        path = tmp_path / "qa.md"
        adapter.write_file(area, path)
        restored = adapter.read_file(path)

        assert restored.name == "qa"
        assert restored.description == area.description
        assert restored.sign_off_criteria == area.sign_off_criteria
        assert restored.instructions == area.instructions
        assert restored.dependencies == ["make"]
        assert restored.model == "haiku"
        assert restored.checks == []
        assert len(adapter.get_conversion_warnings()) == 1

    def test_hand_written_agent(self, adapter, tmp_path):
        path = tmp_path / "docs-validator.md"
        path.write_text("---\ndescription: Checks docs\n---\n\nMake sure the README is current.\n")
        area = adapter.read_file(path)
        assert area.name == "docs"
        assert area.description == "Checks docs"
        assert area.instructions == "Make sure the README is current."
        assert adapter.get_conversion_warnings() == []


class TestGeminiValidationAdapter:
    """Tests for GeminiValidationAdapter."""

    @pytest.fixture
    def adapter(self):
        return GeminiValidationAdapter()

    def test_properties(self, adapter):
        assert adapter.default_dir == "commands"
        assert adapter.file_extension == ".toml"

    def test_marshal(self, adapter, area):
        content = adapter.marshal(area).decode()
        assert '[command]\nname = "qa-validator"' in content
        assert "[[arguments]]" in content
        assert "[content]" in content

        native = tomli.loads(content)
        assert native['command']['description'] == "Qa validation for release readiness. Quality gates for the release."
        assert native['arguments'] == [
            {'name': 'target', 'description': 'Target directory to validate', 'required': False, 'default': '.'}
        ]
        text = native['content']['text']
        assert text.startswith("# Qa Validator")
        assert "- **tests** (required): Unit tests pass\n  Command: `make test`" in text
        assert "- **todos** (optional)\n  Pattern: `TODO|FIXME`\n  Files: `**/*.py`" in text
        assert "- NO-GO: Check failed (blocking)" in text
        assert "Final status: QA VALIDATION: GO or NO-GO" in text

    def test_agent_fields_warned(self, adapter, area):
        area.model = "haiku"
        area.add_tool("Read")
        adapter.marshal(area)
        assert len(adapter.get_conversion_warnings()) == 2

    def test_read_back(self, adapter, area, tmp_path):
        path = tmp_path / "qa.toml"
        adapter.write_file(area, path)
        restored = adapter.read_file(path)
        assert restored.name == "qa"
        assert restored.description == area.description
        assert restored.instructions == area.instructions
        assert restored.dependencies == ["make"]

    def test_invalid_toml(self, adapter):
        with pytest.raises(ParseError):
            adapter.parse(b"[command\n")
        with pytest.raises(ParseError):
            adapter.parse(b'content = "flat"\n')


class TestCodexValidationAdapter:
    """Tests for CodexValidationAdapter."""

    @pytest.fixture
    def adapter(self):
        return CodexValidationAdapter()

    def test_properties(self, adapter):
        assert adapter.default_dir == "prompts"

    def test_marshal(self, adapter, area):
        area.model = "gpt-4"
        fields, body = split_frontmatter(adapter.marshal(area).decode())
        assert fields['name'] == 'qa-validator'
        assert fields['tags'] == ['validation', 'release', 'qa']
        assert fields['model'] == 'gpt-4'
        assert "### 1. tests (Required)\n\nUnit tests pass\n\n**Command:**\n\n```bash\nmake test\n```" in body
        assert "### 2. todos (Optional)" in body
        assert "**Files:** `**/*.py`" in body
        assert "- [ ] tests: [GO/NO-GO/WARN/SKIP]" in body
        assert "FINAL STATUS: QA VALIDATION [GO/NO-GO]" in body

    def test_model_omitted_when_unset(self, adapter, area):
        fields, _ = split_frontmatter(adapter.marshal(area).decode())
        assert 'model' not in fields

    def test_tools_warned(self, adapter, area):
        area.add_tools("Read", "Bash")
        adapter.marshal(area)
        assert adapter.get_conversion_warnings() == [
            "Validation area 'qa': tools are not supported by Codex prompts"
        ]

    def test_read_back(self, adapter, area):
        restored = adapter.parse(adapter.marshal(area))
        assert restored.name == "qa"
        assert restored.sign_off_criteria == area.sign_off_criteria
        assert restored.instructions == area.instructions


class TestValidationCommand:
    """Tests for the validation CLI subcommand."""

    @pytest.fixture
    def specs(self, area, tmp_path):
        specs = tmp_path / "specs"
        write_canonical_file(area, specs / "qa.json")
        write_canonical_file(ValidationArea(name=AREA_SECURITY, description="Secrets"), specs / "security.json")
        return specs

    def test_default_adapter(self, specs, tmp_path, capsys):
        output = tmp_path / "out"
        assert main(['validation', '--specs', str(specs), '-o', str(output)]) == 0
        assert sorted(p.name for p in (output / "claude").iterdir()) == ["qa.md", "security.md"]
        out = capsys.readouterr().out
        assert "Found 2 validation area(s)" in out
        assert "claude: 2 file(s) for agents/" in out

    def test_all_adapters(self, specs, tmp_path):
        output = tmp_path / "out"
        assert main(['validation', '--specs', str(specs), '--adapters', 'all', '-o', str(output)]) == 0
        assert (output / "claude" / "qa.md").exists()
        assert (output / "codex" / "qa.md").exists()
        assert (output / "gemini" / "security.toml").exists()

    def test_unknown_adapter_skipped(self, specs, tmp_path, capsys):
        output = tmp_path / "out"
        args = ['validation', '--specs', str(specs), '--adapters', 'gemini, emacs', '-o', str(output)]
        assert main(args) == 0
        assert "unknown validation adapter 'emacs'" in capsys.readouterr().err
        assert sorted(p.name for p in output.iterdir()) == ["gemini"]

    def test_bad_spec(self, tmp_path, capsys):
        specs = tmp_path / "specs"
        specs.mkdir()
        (specs / "qa.json").write_text(json.dumps({"checks": []}))
        assert main(['validation', '--specs', str(specs), '-o', str(tmp_path / "out")]) == 1
        assert "failed to parse canonical config" in capsys.readouterr().err
