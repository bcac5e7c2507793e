"""
Tests for the rdf2fr command line.
"""

import json

import pytest

from rdf2fr.main import (
    EXIT_CONFIG_ERROR,
    EXIT_INTERNAL_ERROR,
    EXIT_IO_ERROR,
    EXIT_MALFORMED_QUAD,
    EXIT_OK,
    main,
)
from rdf2fr.pipeline import EncodingPipeline


class TestMain:
    """Tests for main()"""

    def test_success(self, nq_file, tmp_path) -> None:
        output = tmp_path / "out.json"
        assert main([str(nq_file), str(output), "-q"]) == EXIT_OK
        assert len(json.loads(output.read_text(encoding="utf-8"))) == 15

    def test_summary_printed(self, nq_file, tmp_path, capsys) -> None:
        assert main([str(nq_file), str(tmp_path / "out.json")]) == EXIT_OK
        assert "ENCODING SUMMARY" in capsys.readouterr().out

    @pytest.mark.parametrize("argv", [[], ["only-one.nq"], ["a.nq", "b.json", "c"]])
    def test_wrong_argument_count(self, argv, tmp_path, capsys, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)
        with pytest.raises(SystemExit) as exc:
            main(argv)

        assert exc.value.code == 2
        assert "usage" in capsys.readouterr().err
        assert not (tmp_path / "b.json").exists()

    def test_version(self, capsys) -> None:
        with pytest.raises(SystemExit) as exc:
            main(["--version"])
        assert exc.value.code == 0
        assert "rdf2fr" in capsys.readouterr().out

    def test_missing_input(self, tmp_path, capsys) -> None:
        code = main([str(tmp_path / "missing.nq"), str(tmp_path / "out.json"), "-q"])
        assert code == EXIT_IO_ERROR
        assert "I/O error" in capsys.readouterr().err

    def test_malformed_input(self, tmp_path, capsys) -> None:
        source = tmp_path / "bad.nq"
        source.write_text("<http://s> <http://p>\n", encoding="utf-8")
        output = tmp_path / "out.json"

        assert main([str(source), str(output), "-q"]) == EXIT_MALFORMED_QUAD
        assert f"{source}:1" in capsys.readouterr().err
        assert not output.exists()

    def test_long_integer_literal(self, tmp_path) -> None:
        source = tmp_path / "long.nq"
        body = "1" * 5000
        source.write_text(
            f'<http://s> <http://p> "{body}"^^<http://www.w3.org/2001/XMLSchema#integer> .\n',
            encoding="utf-8",
        )
        output = tmp_path / "out.json"

        assert main([str(source), str(output), "-q"]) == EXIT_OK
        assert len(json.loads(output.read_text(encoding="utf-8"))) == 5

    def test_surrogate_escape_is_malformed(self, tmp_path, capsys) -> None:
        source = tmp_path / "bad.nq"
        source.write_text('<http://s> <http://p> "\\uD800" .\n', encoding="utf-8")
        output = tmp_path / "out.json"

        assert main([str(source), str(output), "-q"]) == EXIT_MALFORMED_QUAD
        assert f"{source}:1" in capsys.readouterr().err
        assert not output.exists()

    @pytest.mark.parametrize(
        "extra",
        [["--modulus", "not-a-number"], ["--modulus", "1"], ["--threshold", "-5"], ["--limit", "0"]],
    )
    def test_bad_options(self, nq_file, tmp_path, extra) -> None:
        output = tmp_path / "out.json"
        assert main([str(nq_file), str(output), "-q", *extra]) == EXIT_CONFIG_ERROR
        assert not output.exists()

    def test_missing_config_file(self, nq_file, tmp_path) -> None:
        code = main([str(nq_file), str(tmp_path / "out.json"), "-q", "-c", str(tmp_path / "nope.yaml")])
        assert code == EXIT_CONFIG_ERROR

    def test_cli_overrides(self, nq_file, tmp_path) -> None:
        output = tmp_path / "out.json"
        code = main([str(nq_file), str(output), "-q", "--modulus", "97", "--digest", "blake2s", "-l", "2"])

        assert code == EXIT_OK
        sequence = json.loads(output.read_text(encoding="utf-8"))
        assert len(sequence) == 10
        assert all(int(value) < 97 for value in sequence)

    def test_report_option(self, nq_file, tmp_path) -> None:
        report = tmp_path / "run.json"
        assert main([str(nq_file), str(tmp_path / "out.json"), "-q", "-r", str(report)]) == EXIT_OK
        assert json.loads(report.read_text(encoding="utf-8"))["encoding"]["quads_encoded"] == 3

    def test_log_file(self, nq_file, tmp_path) -> None:
        log_file = tmp_path / "run.log"
        assert main([str(nq_file), str(tmp_path / "out.json"), "-v", "--log-file", str(log_file)]) == EXIT_OK
        assert "Pipeline initialized" in log_file.read_text(encoding="utf-8")

    def test_internal_error(self, nq_file, tmp_path, monkeypatch) -> None:
        monkeypatch.setattr(EncodingPipeline, "encode", lambda self, quads: ["-1"])
        output = tmp_path / "out.json"

        assert main([str(nq_file), str(output), "-q"]) == EXIT_INTERNAL_ERROR
        assert not output.exists()
