from embedvideo.services.embed.arguments import FIELD_SCHEMA, parse_embed_args


def test_positional_arguments_follow_schema_order():
    service, args = parse_embed_args(["youtube", "dQw4w9WgXcQ", "center", "", "400x300"])
    assert service == "youtube"
    assert args["id"] == "dQw4w9WgXcQ"
    assert args["alignment"] == "center"
    assert args["description"] == ""
    assert args["dimensions"] == "400x300"


def test_named_argument_consumes_a_position():
    _, args = parse_embed_args(["youtube", "id=abc", "640"])
    assert args["id"] == "abc"
    assert args["alignment"] == "640"
    assert args["dimensions"] == ""


def test_named_values_split_on_first_equals_and_are_trimmed():
    _, args = parse_embed_args(["twitch", " urlArgs = a=1&b=2 "])
    assert args["urlArgs"] == "a=1&b=2"


def test_unknown_named_arguments_are_stored():
    _, args = parse_embed_args(["youtube", "abc", "foo=bar"])
    assert args["foo"] == "bar"


def test_bare_false_in_auto_resize_slot_is_boolean_false():
    raw = ["youtube", "abc", "", "", "", "", "", "", "FALSE"]
    assert FIELD_SCHEMA[7] == "autoResize"
    _, args = parse_embed_args(raw)
    assert args["autoResize"] is False


def test_bare_false_in_other_slot_stays_text():
    _, args = parse_embed_args(["youtube", "abc", "false"])
    assert args["alignment"] == "false"
    assert args["autoResize"] is True


def test_named_auto_resize_is_stored_as_text():
    _, args = parse_embed_args(["youtube", "abc", "autoResize=false"])
    assert args["autoResize"] == "false"


def test_bare_values_past_the_schema_are_ignored():
    raw = ["youtube"] + [f"v{i}" for i in range(12)]
    _, args = parse_embed_args(raw)
    assert args["vAlignment"] == "v8"
    assert "v9" not in args.values()


def test_defaults_without_arguments():
    service, args = parse_embed_args([])
    assert service == ""
    assert args["width"] is None
    assert args["height"] is None
    assert args["autoResize"] is True
