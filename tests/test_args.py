import pytest

from pdargs import args, errors

# --- Classify --------------------------------------------------------------- #


def test_is_long_opt():
    assert args.isLongOpt("--foo")
    assert args.isLongOpt("--foo=bar")
    assert not args.isLongOpt("--")
    assert not args.isLongOpt("---")
    assert not args.isLongOpt("-f")
    assert not args.isLongOpt("foo")


def test_is_short_opt():
    assert args.isShortOpt("-f")
    assert args.isShortOpt("-Syu")
    assert args.isShortOpt("-c=155")
    assert not args.isShortOpt("-")
    assert not args.isShortOpt("--")
    assert not args.isShortOpt("--foo")
    assert not args.isShortOpt("foo")


def test_takes_value():
    assert args.takesValue("foo")
    assert args.takesValue("8080")
    assert args.takesValue("-402")
    assert args.takesValue("-20.24")
    assert args.takesValue("")
    assert not args.takesValue("-f")
    assert not args.takesValue("--foo")
    assert not args.takesValue("-.5")
    assert not args.takesValue("-²")
    assert not args.takesValue("-٣")


def test_non_ascii_digit_is_not_a_value():
    res = args.tokenize(["--n", "-²"])
    assert res.longs == {"n": ""}
    assert res.shorts == ["²"]


# --- Tokenize --------------------------------------------------------------- #


def test_skips_program_name():
    res = args.parse(["./main", "foo"])
    assert res.operands == ["foo"]


def test_long_opts():
    res = args.tokenize(["--port", "8080", "--lines=blank", "--install"])
    assert res.longs == {"port": "8080", "lines": "blank", "install": ""}
    assert res.shortValues == {}
    assert res.shorts == []
    assert res.operands == []


def test_long_opt_followed_by_opt():
    res = args.tokenize(["--root", "-Syu"])
    assert res.longs == {"root": ""}
    assert res.shorts == ["Syu"]


def test_long_opt_negative_value():
    res = args.tokenize(["--negate", "-402", "--portion", "-20.24"])
    assert res.longs == {"negate": "-402", "portion": "-20.24"}


def test_long_opt_inline_value_consumes_next_value():
    res = args.tokenize(["--name=a", "b"])
    assert res.longs == {"name": "a"}
    assert res.operands == []


def test_long_opt_inline_value_consumes_negative_number():
    res = args.tokenize(["--name=a", "-3", "file.txt"])
    assert res.longs == {"name": "a"}
    assert res.shorts == []
    assert res.operands == ["file.txt"]


def test_long_opt_inline_value_keeps_next_opt():
    res = args.tokenize(["--name=a", "-v"])
    assert res.longs == {"name": "a"}
    assert res.shorts == ["v"]


def test_long_opt_split_on_first_equal():
    res = args.tokenize(["--define=key=value"])
    assert res.longs == {"define": "key=value"}


def test_long_opt_last_write_wins():
    res = args.tokenize(["--mode", "active", "--mode", "passive"])
    assert res.longs == {"mode": "passive"}


def test_short_opt_detached_value():
    res = args.tokenize(["-f", "hoo.txt", "-m", "-20.479"])
    assert res.shortValues == {"f": "hoo.txt", "m": "-20.479"}
    assert res.shorts == []


def test_short_opt_equal_value():
    res = args.tokenize(["-f=soft", "-c=55"])
    assert res.shortValues == {"f": "soft", "c": "55"}


def test_short_opt_equal_value_consumes_negative_number():
    res = args.tokenize(["-c=5", "-3"])
    assert res.shortValues == {"c": "5"}
    assert res.shorts == []
    assert res.operands == []


def test_short_opt_equal_value_consumes_next_value():
    res = args.tokenize(["-f=soft", "hard", "-v"])
    assert res.shortValues == {"f": "soft"}
    assert res.shorts == ["v"]
    assert res.operands == []


def test_short_opt_equal_value_keeps_first_char():
    res = args.tokenize(["-Xy=z"])
    assert res.shortValues == {"X": "z"}
    assert res.shorts == []


def test_short_opt_clusters():
    res = args.tokenize(["-Syu", "-iSr", "-c155", "-z-297"])
    assert res.shorts == ["Syu", "iSr", "c155", "z-297"]
    assert res.shortValues == {}


def test_short_opt_last_token():
    res = args.tokenize(["foo", "-v"])
    assert res.shorts == ["v"]
    assert res.operands == ["foo"]


def test_short_opt_cluster_with_detached_value():
    with pytest.raises(errors.InvalidShortOptionError):
        args.tokenize(["-Syu", "firefox"])


def test_short_opt_cluster_with_negative_number():
    with pytest.raises(errors.InvalidShortOptionError):
        args.tokenize(["-ab", "-5"])


def test_short_opt_missing_char():
    with pytest.raises(errors.InvalidShortOptionError):
        args.tokenize(["-=value"])


def test_operands_keep_order():
    res = args.tokenize(["b", "-", "a", "--", "b"])
    assert res.operands == ["b", "-", "a", "--", "b"]


def test_dashes_only_is_operand():
    res = args.tokenize(["---", "-v"])
    assert res.operands == ["---"]
    assert res.longs == {}
    assert res.shorts == ["v"]


def test_operands_after_flag():
    res = args.tokenize(["-v", "--", "file"])
    assert res.shorts == ["v"]
    assert res.operands == ["--", "file"]


# --- Operands --------------------------------------------------------------- #


def test_consume_operand():
    res = args.tokenize(["a", "b"])
    assert res.consumeOperand() == "a"
    assert res.consumeOperand() == "b"
    assert res.consumeOperand() is None


def test_take_operands():
    res = args.tokenize(["a", "-v", "b"])
    assert res.takeOperands() == ["a"]
    assert res.operands == []


# --- Introspection ---------------------------------------------------------- #


def test_unconsumed():
    res = args.tokenize(["--port", "8080", "--root", "-f=soft", "-Syu"])
    assert res.unconsumed() == ["--port=8080", "--root", "-f=soft", "-Syu"]

    res.get(("port", "p"), int)
    res.getFlag(("sus", "S"))
    assert res.unconsumed() == ["--root", "-f=soft", "-yu"]


def test_dump():
    res = args.tokenize(["--port", "8080", "-f", "soft", "-Syu", "file"])
    assert res.dump() == {
        "longs": {"port": "8080"},
        "shortValues": {"f": "soft"},
        "shorts": ["Syu"],
        "operands": ["file"],
    }
