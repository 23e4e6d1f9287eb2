"""
环境快照测试
"""

import dataclasses

import pytest

from thuai_agent.agent.environment_info import Bullet, EnvironmentInfo, Fence, Wall
from thuai_agent.agent.position import Position
from thuai_agent.navigation.common.exceptions import NavigationError, SnapshotError


def test_defaults_are_empty():
    env = EnvironmentInfo()
    assert env.walls == ()
    assert env.fences == ()
    assert env.bullets == ()
    assert list(env.obstacle_positions()) == []


def test_collections_are_frozen_as_tuples():
    walls = [Wall(Position(1, 1))]
    env = EnvironmentInfo(walls=walls)
    walls.append(Wall(Position(2, 2)))
    assert env.walls == (Wall(Position(1, 1)),)
    with pytest.raises(dataclasses.FrozenInstanceError):
        env.walls = ()


def test_obstacle_positions_walls_then_fences_in_order():
    env = EnvironmentInfo(
        walls=[Wall(Position(5, 5)), Wall(Position(1, 1))],
        fences=[Fence(Position(3, 3), health=10)],
        bullets=[Bullet(Position(9, 9), speed=2.0)],
    )
    assert list(env.obstacle_positions()) == [Position(5, 5), Position(1, 1), Position(3, 3)]


def test_fence_rejects_negative_health():
    with pytest.raises(ValueError):
        Fence(Position(0, 0), health=-1)


def test_from_dict_parses_all_entities():
    env = EnvironmentInfo.from_dict({
        "walls": [{"position": {"x": 1, "y": 2}}],
        "fences": [{"position": {"x": 3, "y": 4}, "health": 7}],
        "bullets": [{
            "position": {"x": 5.5, "y": 6.5},
            "speed": 3,
            "damage": 10,
            "traveledDistance": 2.5,
        }],
    })
    assert env.walls == (Wall(Position(1, 2)),)
    assert env.fences == (Fence(Position(3, 4), health=7),)
    assert env.bullets == (Bullet(Position(5.5, 6.5), speed=3.0, damage=10.0, traveled_distance=2.5),)


def test_from_dict_accepts_sequences_and_snake_case():
    env = EnvironmentInfo.from_dict({
        "walls": [{"position": [1, 2]}],
        "bullets": [{"position": [0, 0], "traveled_distance": 4.0}],
    })
    assert env.walls[0].position == Position(1, 2)
    assert env.fences == ()
    assert env.bullets[0].traveled_distance == 4.0


def test_from_dict_missing_collections_default_to_empty():
    env = EnvironmentInfo.from_dict({"walls": None})
    assert env == EnvironmentInfo()


@pytest.mark.parametrize("payload", [
    {"walls": [{}]},
    {"walls": [{"position": {"x": 1}}]},
    {"walls": [{"position": [1, 2, 3]}]},
    {"walls": [{"position": 5}]},
    {"fences": [{"position": [1, 1], "health": -3}]},
    {"fences": [{"position": [1, 1], "health": "lots"}]},
    {"bullets": ["not-a-dict"]},
    ["walls"],
])
def test_from_dict_rejects_malformed_payload(payload):
    with pytest.raises(SnapshotError):
        EnvironmentInfo.from_dict(payload)


@pytest.mark.parametrize("position", [
    {"x": "a", "y": 1},
    {"x": 1, "y": None},
    {"x": True, "y": 1},
    {"x": float("nan"), "y": 1},
    {"x": 1, "y": float("inf")},
    ["3", 4],
    [1, False],
])
def test_from_dict_rejects_non_numeric_coordinates(position):
    with pytest.raises(SnapshotError):
        EnvironmentInfo.from_dict({"walls": [{"position": position}]})


def test_from_dict_rejects_non_numeric_bullet_position():
    with pytest.raises(SnapshotError):
        EnvironmentInfo.from_dict({"bullets": [{"position": {"x": "1.5", "y": 2.0}}]})


def test_snapshot_error_is_navigation_error():
    assert issubclass(SnapshotError, NavigationError)
