"""Tests for the home theater facade."""

from __future__ import annotations

import pytest

from patternctl.domain.facade import (
    Amplifier,
    DvdPlayer,
    HomeTheaterFacade,
    PopcornPopper,
    Projector,
    Screen,
    TheaterLights,
    Tuner,
    build_home_theater,
)


class _Recorder:
    """Stand-in subsystem that logs every call in a shared journal."""

    def __init__(self, name: str, journal: list[str]) -> None:
        self._name = name
        self._journal = journal

    def __getattr__(self, method: str):
        def record(*args: object) -> None:
            suffix = f"({', '.join(map(str, args))})" if args else ""
            self._journal.append(f"{self._name}.{method}{suffix}")

        return record


@pytest.fixture
def recorded() -> tuple[HomeTheaterFacade, list[str]]:
    journal: list[str] = []
    names = ("amp", "tuner", "dvd", "projector", "lights", "screen", "popper")
    recorders = {n: _Recorder(n, journal) for n in names}
    return HomeTheaterFacade(**recorders), journal  # type: ignore[arg-type]


@pytest.fixture
def parts() -> dict[str, object]:
    return {
        "amp": Amplifier(),
        "tuner": Tuner(),
        "dvd": DvdPlayer(),
        "projector": Projector(),
        "lights": TheaterLights(),
        "screen": Screen(),
        "popper": PopcornPopper(),
    }


class TestHomeTheaterFacade:
    def test_watch_movie_sequence(self, recorded: tuple[HomeTheaterFacade, list[str]]) -> None:
        facade, journal = recorded
        facade.watch_movie("Alien")
        assert journal == [
            "popper.on",
            "popper.pop",
            "lights.dim(10)",
            "screen.down",
            "projector.on",
            "projector.widescreen_mode",
            "amp.on",
            "amp.dvd_mode",
            "amp.surround_sound",
            "amp.set_volume(10)",
            "dvd.on",
            "dvd.play(Alien)",
        ]

    def test_end_movie_sequence(self, recorded: tuple[HomeTheaterFacade, list[str]]) -> None:
        facade, journal = recorded
        facade.end_movie()
        assert journal == [
            "popper.off",
            "lights.on",
            "screen.up",
            "projector.off",
            "amp.off",
            "dvd.stop",
            "dvd.eject",
            "dvd.off",
        ]

    def test_watch_movie_drives_real_subsystems(self, parts: dict[str, object]) -> None:
        facade = HomeTheaterFacade(**parts, dim_level=25, volume=7)  # type: ignore[arg-type]
        facade.watch_movie("Heat")
        assert facade.now_showing == "Heat"
        assert parts["lights"].level == 25  # type: ignore[attr-defined]
        assert parts["amp"].volume == 7  # type: ignore[attr-defined]
        assert parts["dvd"].playing == "Heat"  # type: ignore[attr-defined]
        assert parts["screen"].is_down  # type: ignore[attr-defined]

    def test_end_movie_resets(self, parts: dict[str, object]) -> None:
        facade = HomeTheaterFacade(**parts)  # type: ignore[arg-type]
        facade.watch_movie("Heat")
        facade.end_movie()
        assert facade.now_showing is None
        assert parts["lights"].level == 100  # type: ignore[attr-defined]
        assert not parts["projector"].is_on  # type: ignore[attr-defined]
        assert not parts["dvd"].has_disc  # type: ignore[attr-defined]

    def test_subsystem_failure_propagates(self, parts: dict[str, object]) -> None:
        class BrokenProjector(Projector):
            def on(self) -> None:
                raise RuntimeError("bulb blown")

        parts["projector"] = BrokenProjector()
        facade = HomeTheaterFacade(**parts)  # type: ignore[arg-type]
        with pytest.raises(RuntimeError, match="bulb blown"):
            facade.watch_movie("Heat")
        assert parts["screen"].is_down  # type: ignore[attr-defined]
        assert not parts["amp"].is_on  # type: ignore[attr-defined]

    def test_build_home_theater(self) -> None:
        facade = build_home_theater(dim_level=5, volume=3)
        facade.watch_movie("Up")
        assert facade.now_showing == "Up"
