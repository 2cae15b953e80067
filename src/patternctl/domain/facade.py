"""Facade pattern: one front panel for a home theater.

The facade is handed every subsystem at construction time and never
creates one itself. Its operations are fixed, ordered call sequences; the
subsystems are not reachable through it.

There is no rollback: if a subsystem raises halfway through a sequence the
exception propagates and the remaining steps do not run.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class Amplifier:
    def __init__(self) -> None:
        self.is_on = False
        self.mode: str | None = None
        self.surround = False
        self.volume = 5

    def on(self) -> None:
        self.is_on = True

    def dvd_mode(self) -> None:
        self.mode = "dvd"

    def surround_sound(self) -> None:
        self.surround = True

    def set_volume(self, level: int) -> None:
        self.volume = level

    def off(self) -> None:
        self.is_on = False
        self.surround = False


class Tuner:
    """Present in every theater; no movie step uses it."""

    def __init__(self) -> None:
        self.frequency: float | None = None


class DvdPlayer:
    def __init__(self) -> None:
        self.is_on = False
        self.playing: str | None = None
        self.has_disc = False

    def on(self) -> None:
        self.is_on = True

    def play(self, title: str) -> None:
        self.has_disc = True
        self.playing = title

    def stop(self) -> None:
        self.playing = None

    def eject(self) -> None:
        self.has_disc = False

    def off(self) -> None:
        self.is_on = False


class Projector:
    def __init__(self) -> None:
        self.is_on = False
        self.widescreen = False

    def on(self) -> None:
        self.is_on = True

    def widescreen_mode(self) -> None:
        self.widescreen = True

    def off(self) -> None:
        self.is_on = False
        self.widescreen = False


class TheaterLights:
    def __init__(self) -> None:
        self.level = 100

    def dim(self, level: int) -> None:
        self.level = level

    def on(self) -> None:
        self.level = 100


class Screen:
    def __init__(self) -> None:
        self.is_down = False

    def down(self) -> None:
        self.is_down = True

    def up(self) -> None:
        self.is_down = False


class PopcornPopper:
    def __init__(self) -> None:
        self.is_on = False
        self.batches = 0

    def on(self) -> None:
        self.is_on = True

    def pop(self) -> None:
        self.batches += 1

    def off(self) -> None:
        self.is_on = False


class HomeTheaterFacade:
    """Composite ``watch_movie`` / ``end_movie`` over seven subsystems."""

    def __init__(
        self,
        *,
        amp: Amplifier,
        tuner: Tuner,
        dvd: DvdPlayer,
        projector: Projector,
        lights: TheaterLights,
        screen: Screen,
        popper: PopcornPopper,
        dim_level: int = 10,
        volume: int = 10,
    ) -> None:
        self._amp = amp
        self._tuner = tuner
        self._dvd = dvd
        self._projector = projector
        self._lights = lights
        self._screen = screen
        self._popper = popper
        self._dim_level = dim_level
        self._volume = volume
        self._now_showing: str | None = None

    @property
    def now_showing(self) -> str | None:
        return self._now_showing

    def watch_movie(self, title: str) -> None:
        logger.debug("Getting ready to watch %s", title)
        self._popper.on()
        self._popper.pop()
        self._lights.dim(self._dim_level)
        self._screen.down()
        self._projector.on()
        self._projector.widescreen_mode()
        self._amp.on()
        self._amp.dvd_mode()
        self._amp.surround_sound()
        self._amp.set_volume(self._volume)
        self._dvd.on()
        self._dvd.play(title)
        self._now_showing = title

    def end_movie(self) -> None:
        logger.debug("Shutting theater down after %s", self._now_showing)
        self._popper.off()
        self._lights.on()
        self._screen.up()
        self._projector.off()
        self._amp.off()
        self._dvd.stop()
        self._dvd.eject()
        self._dvd.off()
        self._now_showing = None


def build_home_theater(*, dim_level: int = 10, volume: int = 10) -> HomeTheaterFacade:
    """Wire a facade around freshly built default subsystems."""
    return HomeTheaterFacade(
        amp=Amplifier(),
        tuner=Tuner(),
        dvd=DvdPlayer(),
        projector=Projector(),
        lights=TheaterLights(),
        screen=Screen(),
        popper=PopcornPopper(),
        dim_level=dim_level,
        volume=volume,
    )
