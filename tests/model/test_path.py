from __future__ import annotations

from collections.abc import Sequence

import pytest

from polypath.model.path import Path
from polypath.types.base import INVALID_PATH_MSG, InvalidPathError

BOX = [[100, 100], [100, 200], [200, 200], [200, 100], [100, 100]]


@pytest.fixture
def box() -> Path:
    return Path(BOX)


def test_path_from_points(box: Path) -> None:
    """Construction from points stores int tuples and the canonical string."""
    assert len(box) == 5
    assert box.points == ((100, 100), (100, 200), (200, 200), (200, 100), (100, 100))
    assert box.to_string() == "M100 100 L100 200 L200 200 L200 100 Z"
    assert str(box) == box.to_string()


def test_path_from_string() -> None:
    p = Path("m100 100 l0 100 100 0 0 -100 z")
    assert p.points == ((100, 100), (100, 200), (200, 200), (200, 100), (100, 100))
    # Cached string is canonical, not the original spelling
    assert p.to_string() == "M100 100 L100 200 L200 200 L200 100 Z"


def test_path_from_path(box: Path) -> None:
    p = Path(box)
    assert p == box
    assert p is not box


def test_path_is_read_only_sequence(box: Path) -> None:
    assert isinstance(box, Sequence)
    assert not isinstance(box, list)
    assert box[0] == (100, 100)
    assert box[-2] == (200, 100)
    assert list(box) == [tuple(pt) for pt in BOX]
    assert (200, 200) in box
    assert box.index((100, 200)) == 1
    assert box.count((100, 100)) == 2
    assert list(reversed(box))[0] == (100, 100)
    with pytest.raises(TypeError):
        box[0] = (0, 0)  # type: ignore[index]


def test_path_properties(box: Path) -> None:
    assert box.closed
    assert box.start == (100, 100)
    assert box.end == (100, 100)
    assert not box.slice(0, -1).closed
    assert box.slice(0, -1).end == (200, 100)


@pytest.mark.parametrize(
    "value",
    [
        None,
        42,
        "",
        "M100 100",
        "M100 100 L100.5 200",
        [],
        [[100, 100]],
        [[100, 100], [100, float("nan")]],
        [[100, 100], [100, 200.5]],
        [[], [], []],
        {"x": 1, "y": 2},
    ],
)
def test_path_invalid_input_raises(value) -> None:
    with pytest.raises(InvalidPathError, match=INVALID_PATH_MSG):
        Path(value)


def test_invalid_path_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        Path([[0, 0]])


def test_invalid_path_error_keeps_value() -> None:
    with pytest.raises(InvalidPathError) as exc_info:
        Path("M1 1")
    assert exc_info.value.value == "M1 1"


def test_clone(box: Path) -> None:
    clone = box.clone()
    assert clone is not box
    assert isinstance(clone, Path)
    assert clone.to_string() == box.to_string()
    assert len(clone) == len(box)
    assert clone == box


def test_filter_identity(box: Path) -> None:
    filtered = box.filter(lambda pt: True)
    assert isinstance(filtered, Path)
    assert filtered is not box
    assert filtered.to_string() == box.to_string()


def test_filter_drops_points(box: Path) -> None:
    filtered = box.filter(lambda pt: pt != (200, 200))
    assert filtered.to_string() == "M100 100 L100 200 L200 100 Z"


def test_filter_none_keeps_truthy_points(box: Path) -> None:
    assert box.filter(None) == box


def test_filter_to_single_point_raises(box: Path) -> None:
    with pytest.raises(InvalidPathError):
        box.filter(lambda pt: pt == (200, 200))
    with pytest.raises(InvalidPathError):
        box.filter(lambda pt: False)


def test_map_identity(box: Path) -> None:
    mapped = box.map(lambda pt: pt)
    assert isinstance(mapped, Path)
    assert mapped.to_string() == box.to_string()


def test_map_swaps_coordinates(box: Path) -> None:
    mapped = box.map(lambda pt: [pt[1], pt[0]])
    assert mapped.to_string() == "M100 100 L200 100 L200 200 L100 200 Z"


def test_map_translate_accepts_integral_floats(box: Path) -> None:
    mapped = box.map(lambda pt: (pt[0] / 2, pt[1] / 2))
    assert mapped.to_string() == "M50 50 L50 100 L100 100 L100 50 Z"


def test_map_to_invalid_points_raises(box: Path) -> None:
    with pytest.raises(InvalidPathError):
        box.map(lambda pt: "x")
    with pytest.raises(InvalidPathError):
        box.map(lambda pt: (pt[0] + 0.5, pt[1]))
    with pytest.raises(InvalidPathError):
        box.map(lambda pt: (float("nan"), pt[1]))


def test_slice(box: Path) -> None:
    assert box.slice(0).to_string() == box.to_string()
    assert box.slice().to_string() == box.to_string()
    assert box.slice(0, -1).to_string() == "M100 100 L100 200 L200 200 L200 100"
    assert box.slice(1, -1).to_string() == "M100 200 L200 200 L200 100"
    assert box.slice(-2).to_string() == "M200 100 L100 100"


def test_slice_too_short_raises(box: Path) -> None:
    with pytest.raises(InvalidPathError):
        box.slice(0, 1)
    with pytest.raises(InvalidPathError):
        box.slice(4)
    with pytest.raises(InvalidPathError):
        box.slice(3, 1)


def test_getitem_slice_returns_path(box: Path) -> None:
    sub = box[1:-1]
    assert isinstance(sub, Path)
    assert sub.to_string() == "M100 200 L200 200 L200 100"
    assert box[::2].to_string() == "M100 100 L200 200 Z"
    with pytest.raises(InvalidPathError):
        box[:1]


def test_failed_transformation_leaves_source_intact(box: Path) -> None:
    before = (box.points, box.to_string())
    with pytest.raises(InvalidPathError):
        box.filter(lambda pt: False)
    with pytest.raises(InvalidPathError):
        box.map(lambda pt: None)
    with pytest.raises(InvalidPathError):
        box.slice(0, 1)
    assert (box.points, box.to_string()) == before


def test_transformations_preserve_subclass(box: Path) -> None:
    class LabeledPath(Path):
        pass

    labeled = LabeledPath(BOX)
    assert type(labeled.clone()) is LabeledPath
    assert type(labeled.map(lambda pt: pt)) is LabeledPath
    assert type(labeled.filter(lambda pt: True)) is LabeledPath
    assert type(labeled.slice(1)) is LabeledPath


def test_path_equality_and_hash() -> None:
    p1 = Path("M0 0 L10 0")
    p2 = Path([[0, 0], [10, 0]])
    p3 = Path("M0 0 L10 10")

    assert p1 == p2
    assert p1 != p3
    assert p1 != "M0 0 L10 0"
    assert len({p1, p2, p3}) == 2


def test_path_repr(box: Path) -> None:
    assert repr(box) == "Path('M100 100 L100 200 L200 200 L200 100 Z')"


def test_input_points_are_copied() -> None:
    points = [[0, 0], [10, 0]]
    p = Path(points)
    points[0][0] = 99
    points.append([5, 5])
    assert p.points == ((0, 0), (10, 0))


def test_oversized_coordinates_raise_invalid_path() -> None:
    with pytest.raises(InvalidPathError):
        Path("M" + "1" * 5000 + " 0 L0 0")
    with pytest.raises(InvalidPathError):
        Path([[10**5000, 0], [0, 0]])


def test_map_to_oversized_coordinates_raises(box: Path) -> None:
    with pytest.raises(InvalidPathError):
        box.map(lambda pt: (pt[0] * 10**5000, pt[1]))


def test_public_members_are_documented() -> None:
    for name in (
        "points",
        "closed",
        "clone",
        "to_string",
        "__len__",
        "__iter__",
        "__eq__",
        "__hash__",
        "__str__",
        "__repr__",
    ):
        assert getattr(Path, name).__doc__, name
