import pytest

from click.testing import CliRunner

from mnemonic16.cli import clean_phrase, decode_bytes, encode_bytes, mnemonic16, numbered_words


@pytest.fixture
def run(tmp_path):
    runner = CliRunner()
    config_path = tmp_path / "config.toml"

    def invoke(*args, input=None, config=None):
        if config is not None:
            config_path.write_text(config)
        return runner.invoke(mnemonic16, ["--config", str(config_path), *args], input=input)

    return invoke


def test_encode_hex(run):
    result = run("encode", "d015db158c60")
    assert result.exit_code == 0
    assert result.output.strip() == "sugar21 toffee21 mobile32"


def test_encode_abbreviated(run):
    result = run("encode", "--abbreviated", "d015db158c60")
    assert result.output.strip() == "sug21 tof21 mob32"


def test_encode_stdin(run):
    result = run("encode", "--format", "base64", input="AAA=\n")
    assert result.exit_code == 0
    assert result.output.strip() == "abbey0"


def test_encode_raw(run):
    result = run("encode", "--format", "raw", input=b"\x00")
    assert result.exit_code == 0
    assert result.output.strip() == "abbey64"


def test_encode_invalid_hex(run):
    result = run("encode", "xyz")
    assert result.exit_code == 1
    assert "ERROR" in result.output


def test_decode(run):
    result = run("decode", "sug21 tof21 mob32")
    assert result.exit_code == 0
    assert result.output.strip() == "d015db158c60"


def test_decode_cleans_whitespace_and_case(run):
    result = run("decode", input="  Sugar21\n toffee21   MOB32 \n")
    assert result.exit_code == 0
    assert result.output.strip() == "d015db158c60"


def test_decode_raw(run):
    result = run("decode", "--format", "raw", "abbey0 abbey64")
    assert result.exit_code == 0
    assert result.stdout_bytes == b"\x00\x00\x00"


def test_decode_invalid(run):
    result = run("decode", "sugar21 abbey64 mob32")
    assert result.exit_code == 1
    assert "ERROR" in result.output
    assert "64" in result.output


def test_normalize(run):
    result = run("normalize", "sug21 tof21 mob32")
    assert result.exit_code == 0
    assert result.output.strip() == "sugar21 toffee21 mobile32"


def test_config_defaults(run):
    config = '[default]\nformat = "base64"\nabbreviated = true\n'
    result = run("encode", "AAA=", config=config)
    assert result.output.strip() == "abb0"
    result = run("decode", "abbey0", config=config)
    assert result.output.strip() == "AAA="


def test_invalid_config(run):
    result = run("encode", "00", config="[default]\nformat = 1\n")
    assert result.exit_code == 1
    assert "Configuration file invalid" in result.output


def test_generate(run):
    result = run("generate", "--bytes", "3")
    assert result.exit_code == 0
    assert "RANDOM 24 BIT PHRASE" in result.output
    assert " 2. " in result.output
    assert "64" in result.output


def test_helpers():
    assert clean_phrase(" Abbey0\t ZOOM63\n") == "abbey0 zoom63"
    assert encode_bytes(b"\x01\xff", "base64") == "Af8="
    assert decode_bytes("01ff", "hex") == b"\x01\xff"
    with pytest.raises(ValueError):
        decode_bytes("not base64!", "base64")
    assert numbered_words("abbey0 zoom63") == [" 1. abbey0   " + "   " + " 2. zoom63   "]
