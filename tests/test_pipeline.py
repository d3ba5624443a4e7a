"""Whole pipeline, document source, writer and CLI."""

import logging

import pytest

import run_generator
from apidoc_codegen import CodeGenerator, GeneratorConfig, generate_sources
from apidoc_codegen.exceptions import DocumentSourceError, OutputWriteError
from apidoc_codegen.schemas import GeneratedSources
from apidoc_codegen.source import detect_charset_from_bytes, read_document
from apidoc_codegen.writer import write_sources


ENV_VARS = ("APIDOC_SOURCE", "APIDOC_OUTPUT_DIR", "APIDOC_LOG_LEVEL", "APIDOC_BASE_URL")


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestGenerator:

    def test_output_is_deterministic(self, sample_document):
        first = generate_sources(sample_document)
        second = CodeGenerator().generate(sample_document)
        assert first.types_source == second.types_source
        assert first.operations_source == second.operations_source

    def test_synthetic_unions_precede_document_types(self, sample_document):
        text = generate_sources(sample_document).types_source
        positions = [text.index(f"class {name}(") for name in
                     ("ReplyMarkup", "ChatId", "FileOrPath", "User", "Message", "InputMedia")]
        assert positions == sorted(positions)

    def test_counts_and_warnings(self, sample_document):
        sources = generate_sources(sample_document)
        # 3 synthetic unions, 5 records, 1 union, 3 operations; PassportElementError is substituted
        assert sources.entity_count == 12
        assert len(sources.warnings) == 1
        assert "PassportElementError" in sources.warnings[0]

    def test_document_aliases_shape_operations(self, sample_document):
        ops = generate_sources(sample_document).operations_source
        assert "        chatId: ChatId,\n" in ops
        assert "        replyMarkup: Optional[ReplyMarkup] = None,\n" in ops
        assert "        error: Optional[PassportElementErrorDataField] = None,\n" in ops

    def test_plain_config_uses_inline_sums(self, sample_document):
        sources = generate_sources(sample_document, GeneratorConfig.plain())
        assert "class ChatId(" not in sources.types_source
        assert "        chatId: Either[int, str],\n" in sources.operations_source

    def test_base_url_resolves_note_links(self):
        config = GeneratorConfig.plain(base_url="https://core.telegram.org/bots/api")
        sources = generate_sources(
            "<h4>getMe</h4>\n<p>Returns a <a href=\"#user\">User</a> object.</p>", config
        )
        assert "Returns a [User](https://core.telegram.org/bots/api#user) object." in sources.operations_source

    def test_generate_file(self, sample_file):
        sources = CodeGenerator().generate_file(sample_file)
        assert "class User(BaseModel):" in sources.types_source

    def test_empty_document(self):
        sources = generate_sources("", GeneratorConfig.plain())
        assert sources.entity_count == 0
        assert "class TelegramAPI:" in sources.operations_source


class TestConfig:

    def test_from_env(self, clean_env):
        clean_env.setenv("APIDOC_SOURCE", "page.html")
        clean_env.setenv("APIDOC_LOG_LEVEL", "debug")
        config = GeneratorConfig.from_env(output_dir="out")
        assert config.source == "page.html"
        assert config.output_dir == "out"
        assert config.log_level == 10

    def test_explicit_overrides_beat_environment(self, clean_env):
        clean_env.setenv("APIDOC_SOURCE", "page.html")
        assert GeneratorConfig.from_env(source="other.html").source == "other.html"
        assert GeneratorConfig.from_env(source=None).source == "page.html"

    def test_unknown_log_level_falls_back(self, clean_env):
        clean_env.setenv("APIDOC_LOG_LEVEL", "chatty")
        assert GeneratorConfig.from_env().log_level == GeneratorConfig().log_level

    def test_default_tables_are_not_shared(self):
        first = GeneratorConfig()
        first.type_aliases["Integer"] = "Changed"
        first.synthetic_unions[0].cases.append("Extra")
        second = GeneratorConfig()
        assert second.type_aliases["Integer"] == "Int"
        assert "Extra" not in second.synthetic_unions[0].cases


class TestSource:

    def test_meta_charset(self):
        assert detect_charset_from_bytes(b'<html><head><meta charset="utf-8">') == "utf-8"
        assert detect_charset_from_bytes(b"<meta charset=ISO-8859-1>") == "windows-1252"
        assert detect_charset_from_bytes(
            b'<meta http-equiv="Content-Type" content="text/html; charset=koi8-r">'
        ) == "koi8-r"
        assert detect_charset_from_bytes(b"<html>") == "utf-8"

    def test_line_endings_are_normalized(self, tmp_path):
        path = tmp_path / "page.html"
        path.write_bytes(b"<h4>User</h4>\r\n<p>Caf\xc3\xa9</p>\r")
        assert read_document(path) == "<h4>User</h4>\n<p>Café</p>\n"

    def test_declared_charset_is_used(self, tmp_path):
        path = tmp_path / "page.html"
        path.write_bytes(b'<meta charset="iso-8859-1">\n<p>Caf\xe9</p>')
        assert read_document(path).endswith("<p>Café</p>")

    def test_unknown_charset_falls_back_to_utf8(self, tmp_path):
        path = tmp_path / "page.html"
        path.write_bytes(b'<meta charset="no-such-charset">\n<p>ok</p>')
        assert read_document(path).endswith("<p>ok</p>")

    def test_missing_file(self, tmp_path):
        with pytest.raises(DocumentSourceError) as excinfo:
            read_document(tmp_path / "missing.html")
        assert excinfo.value.path.endswith("missing.html")
        assert "Cannot read document" in excinfo.value.message


class TestWriter:

    def test_writes_both_modules(self, tmp_path):
        sources = GeneratedSources(types_source="# types\n", operations_source="# ops\n")
        paths = write_sources(sources, tmp_path / "out")
        assert [path.name for path in paths] == ["models.py", "api.py"]
        assert paths[0].read_text(encoding="utf-8") == "# types\n"
        assert paths[1].read_text(encoding="utf-8") == "# ops\n"

    def test_replaces_previous_output(self, tmp_path):
        (tmp_path / "models.py").write_text("stale", encoding="utf-8")
        sources = GeneratedSources(types_source="fresh", operations_source="")
        write_sources(sources, tmp_path)
        assert (tmp_path / "models.py").read_text(encoding="utf-8") == "fresh"

    def test_configured_file_names(self, tmp_path):
        config = GeneratorConfig(types_module="types_gen", operations_module="methods")
        sources = GeneratedSources(types_source="", operations_source="")
        paths = write_sources(sources, tmp_path, config)
        assert [path.name for path in paths] == ["types_gen.py", "methods.py"]

    def test_unwritable_target(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("not a directory", encoding="utf-8")
        sources = GeneratedSources(types_source="", operations_source="")
        with pytest.raises(OutputWriteError) as excinfo:
            write_sources(sources, blocker / "out")
        assert excinfo.value.path.endswith("out")


class TestCli:

    def test_success(self, clean_env, sample_file, tmp_path, capsys):
        out_dir = tmp_path / "generated"
        assert run_generator.main([str(sample_file), "-o", str(out_dir)]) == 0
        assert "Success!" in capsys.readouterr().out
        assert (out_dir / "models.py").exists()
        assert (out_dir / "api.py").exists()

    def test_environment_supplies_paths(self, clean_env, sample_file, tmp_path, capsys):
        out_dir = tmp_path / "from-env"
        clean_env.setenv("APIDOC_SOURCE", str(sample_file))
        clean_env.setenv("APIDOC_OUTPUT_DIR", str(out_dir))
        assert run_generator.main([]) == 0
        assert (out_dir / "models.py").exists()

    def test_no_fast_init(self, clean_env, sample_file, tmp_path):
        out_dir = tmp_path / "generated"
        assert run_generator.main([str(sample_file), "-o", str(out_dir), "--no-fast-init"]) == 0
        assert "def photo(" not in (out_dir / "models.py").read_text(encoding="utf-8")

    def test_log_file_and_clean_stdout(self, clean_env, sample_file, tmp_path, capsys):
        log_file = tmp_path / "codegen.log"
        package_logger = logging.getLogger("apidoc_codegen")
        try:
            code = run_generator.main([
                str(sample_file), "-o", str(tmp_path / "out"), "--verbose", "--log-file", str(log_file),
            ])
        finally:
            for handler in [h for h in package_logger.handlers if isinstance(h, logging.FileHandler)]:
                package_logger.removeHandler(handler)
                handler.close()

        assert code == 0
        assert capsys.readouterr().out == "Success!\n"
        assert "apidoc_codegen.scanner - INFO - Scanned" in log_file.read_text(encoding="utf-8")

    def test_missing_source_fails(self, clean_env, tmp_path, capsys):
        code = run_generator.main([str(tmp_path / "missing.html"), "-o", str(tmp_path / "out")])
        assert code == 1
        assert "Failed: Cannot read document" in capsys.readouterr().out
        assert not (tmp_path / "out").exists()
