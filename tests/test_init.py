import upver


def test_public_api_exports() -> None:
    for name in upver.__all__:
        assert hasattr(upver, name), name


def test_top_level_round_trip() -> None:
    v = upver.parse("1.0 b2")

    assert isinstance(v, upver.VersionIdentifier)
    assert v.stage is upver.Stage.BETA
    assert upver.from_descriptive_form(str(v)) == v
    assert upver.compare(upver.parse("1.0"), v) is upver.Ordering.GREATER
    assert upver.highest([v, upver.parse("0.9")]) == v
    assert upver.lowest([v, upver.parse("0.9")]) == upver.parse("0.9")
    assert upver.is_valid("1.0 b2") is True


def test_error_hierarchy() -> None:
    for err in (upver.InvalidFormat, upver.InvalidComponent, upver.EmptyInput):
        assert issubclass(err, upver.VersionError)
        assert issubclass(err, ValueError)
    assert issubclass(upver.NullArgument, TypeError)
