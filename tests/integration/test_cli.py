"""
End-to-end tests for the hide command line.
"""

import json

import pytest
import yaml

from hide.cli import main, split_keys
from hide.core.definitions import Placeholder


@pytest.fixture
def write_json(tmp_path):
    def _write(content, name="sample.json"):
        path = tmp_path / name
        path.write_text(content if isinstance(content, str) else json.dumps(content))
        return path

    return _write


def run(capsys, *argv):
    code = main(list(argv))
    out, err = capsys.readouterr()
    return code, out, err


def test_split_keys():
    assert split_keys(["name, users", "a"]) == ["name", "users", "a"]
    assert split_keys(["a,,b"]) == ["a", "", "b"]
    assert split_keys(None) == []


def test_no_arguments_prints_help(config_path, capsys):
    code, out, err = run(capsys)
    assert code == 2
    assert "usage: hide" in err


def test_output_requires_input(config_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["-o", "out.json"])
    assert exc.value.code == 2
    assert "-i/--input" in capsys.readouterr().err


def test_file_doesnt_exist(config_path, capsys):
    code, out, err = run(capsys, "-i", "test/file/doesnt/exist")
    assert code == 1
    assert "could not read file" in err
    assert out == ""


def test_invalid_input_json(config_path, write_json, capsys):
    path = write_json('{"user": {"password": "secret",} ')
    code, out, err = run(capsys, "-i", str(path))
    assert code == 1
    assert "could not parse file" in err


def test_hide_values_in_simple_json(config_path, write_json, capsys):
    path = write_json({"name": "Name", "surname": "Surname", "age": 99})

    code, out, err = run(capsys, "-i", str(path), "--add-keys", "name,surname")

    assert code == 0
    assert json.loads(out) == {
        "name": Placeholder.STRING,
        "surname": Placeholder.STRING,
        "age": 99,
    }
    assert f'"name": "{Placeholder.STRING}"' in out


def test_hide_values_in_json_array(config_path, write_json, capsys):
    path = write_json(
        [
            {"username": "alice", "password": "secret1"},
            {"username": "bob", "password": "secret2"},
        ]
    )

    code, out, _ = run(capsys, "-i", str(path), "--add-keys", "password")

    assert code == 0
    assert json.loads(out) == [
        {"username": "alice", "password": Placeholder.STRING},
        {"username": "bob", "password": Placeholder.STRING},
    ]


def test_array_inside_object_with_removed_keys(config_path, write_json, capsys):
    path = write_json(
        {
            "users": [
                {"name": "Alice", "password": "secret1"},
                {"name": "Bob", "password": "secret2"},
            ]
        }
    )
    main(["--add-keys", "name,users"])
    capsys.readouterr()

    code, out, _ = run(
        capsys, "-i", str(path), "--add-keys", "password", "--remove-keys", "name, users"
    )

    assert code == 0
    assert json.loads(out) == {
        "users": [
            {"name": "Alice", "password": Placeholder.STRING},
            {"name": "Bob", "password": Placeholder.STRING},
        ]
    }


def test_hide_json_object(config_path, write_json, capsys):
    path = write_json({"users": [{"name": "Alice", "password": "secret1"}]})

    code, out, _ = run(capsys, "-i", str(path), "--add-keys", "users")

    assert code == 0
    assert json.loads(out) == {"users": Placeholder.ARRAY}


@pytest.mark.parametrize("content", ["{}", "[]"])
def test_empty_containers(config_path, write_json, capsys, content):
    path = write_json(content)
    code, out, _ = run(capsys, "-i", str(path))
    assert code == 0
    assert out.strip() == content


def test_storing_config(config_path, capsys):
    code, out, _ = run(capsys, "--add-keys", "name,surname")
    assert code == 0
    assert out == ""
    assert yaml.safe_load(config_path.read_text()) == {
        "sensitive_keys": ["name", "surname"]
    }

    code, _, _ = run(capsys, "--remove-keys", "name")
    assert code == 0
    assert yaml.safe_load(config_path.read_text()) == {"sensitive_keys": ["surname"]}


def test_repeated_flags_and_failed_keys_do_not_abort(config_path, capsys):
    code, _, err = run(capsys, "--add-keys", "a", "--add-keys", "a,b", "--remove-keys", "zzz")
    assert code == 0
    assert "already exists" in err
    assert "not found" in err
    assert yaml.safe_load(config_path.read_text()) == {"sensitive_keys": ["a", "b"]}


def test_output_file(config_path, write_json, tmp_path, capsys):
    path = write_json({"token": True, "id": 1})
    target = tmp_path / "out.json"

    code, out, _ = run(capsys, "-i", str(path), "-o", str(target), "--add-keys", "token")

    assert code == 0
    assert out == ""
    assert json.loads(target.read_text()) == {"token": Placeholder.BOOL, "id": 1}


def test_broken_config_aborts(config_path, write_json, capsys):
    config_path.parent.mkdir(parents=True)
    config_path.write_text("sensitive_keys: [oops\n")
    path = write_json({"a": 1})

    code, out, err = run(capsys, "-i", str(path))

    assert code == 1
    assert "could not load config" in err
    assert out == ""


def test_debug_logs_to_stderr_only(config_path, write_json, capsys):
    path = write_json({"pw": "x"})

    code, out, err = run(capsys, "-i", str(path), "--add-keys", "pw", "--debug")

    assert code == 0
    assert json.loads(out) == {"pw": Placeholder.STRING}
    messages = [json.loads(line)["message"] for line in err.splitlines()]
    assert "Redaction successful: 1 fields hidden" in messages


def test_deeply_nested_array_document(config_path, write_json, capsys):
    depth = 500
    path = write_json("[" * depth + '{"pw": 1}' + "]" * depth)

    code, out, err = run(capsys, "-i", str(path), "--add-keys", "pw")

    assert code == 0, err
    node = json.loads(out)
    for _ in range(depth):
        node = node[0]
    assert node == {"pw": Placeholder.NUMBER}


def test_help_mentions_whitespace_stripping(config_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--help"])
    assert exc.value.code == 0
    help_text = " ".join(capsys.readouterr().out.split())
    assert "whitespace around each key is stripped" in help_text
