"""StructuralService: decorator, facade, and adapter scenarios."""

from __future__ import annotations

from typing import Any

from patternctl.domain.adapter import Mallard, TurkeyAdapter, WildTurkey, exercise
from patternctl.domain.decorator import BASES, CONDIMENTS, chain_depth, decorate
from patternctl.domain.facade import (
    Amplifier,
    DvdPlayer,
    HomeTheaterFacade,
    PopcornPopper,
    Projector,
    Screen,
    TheaterLights,
    Tuner,
)
from patternctl.services.base import BaseService
from patternctl.services.result import ServiceResult


def _theater_snapshot(
    amp: Amplifier,
    dvd: DvdPlayer,
    projector: Projector,
    lights: TheaterLights,
    screen: Screen,
    popper: PopcornPopper,
) -> dict[str, Any]:
    return {
        "amp_on": amp.is_on,
        "volume": amp.volume,
        "surround": amp.surround,
        "dvd_playing": dvd.playing,
        "projector_on": projector.is_on,
        "widescreen": projector.widescreen,
        "lights": lights.level,
        "screen_down": screen.is_down,
        "popper_on": popper.is_on,
    }


class StructuralService(BaseService):
    """Scenarios for the structural patterns."""

    def brew_coffee(self, base: str, condiments: list[str] | tuple[str, ...] = ()) -> ServiceResult:
        """Wrap *base* in *condiments*, innermost first."""
        op = "brew_coffee"
        try:
            beverage_cls = BASES[base]
            wrappers = [CONDIMENTS[name] for name in condiments]
        except KeyError as exc:
            return self._failure(
                op,
                KeyError(f"Unknown beverage part: {exc.args[0]!r}"),
                bases=sorted(BASES),
                condiments=sorted(CONDIMENTS),
            )
        beverage = decorate(beverage_cls(), *wrappers)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "description": beverage.description(),
                "cost": str(beverage.cost()),
                "condiments": chain_depth(beverage),
            },
        )

    def watch_movie(self, title: str) -> ServiceResult:
        """Run ``watch_movie`` then ``end_movie`` and snapshot the subsystems."""
        theater = self.settings.theater
        amp, dvd, projector = Amplifier(), DvdPlayer(), Projector()
        lights, screen, popper = TheaterLights(), Screen(), PopcornPopper()
        facade = HomeTheaterFacade(
            amp=amp,
            tuner=Tuner(),
            dvd=dvd,
            projector=projector,
            lights=lights,
            screen=screen,
            popper=popper,
            dim_level=theater.dim_level,
            volume=theater.volume,
        )
        facade.watch_movie(title)
        during = _theater_snapshot(amp, dvd, projector, lights, screen, popper)
        facade.end_movie()
        after = _theater_snapshot(amp, dvd, projector, lights, screen, popper)
        return ServiceResult(
            ok=True,
            op="watch_movie",
            data={
                "title": title,
                "popcorn_batches": popper.batches,
                "during": during,
                "after": after,
            },
        )

    def adapt_turkey(self) -> ServiceResult:
        """Drive a mallard and an adapted turkey through the same duck client."""
        turkey = WildTurkey()
        adapted = exercise(TurkeyAdapter(turkey))
        return ServiceResult(
            ok=True,
            op="adapt_turkey",
            data={
                "mallard": exercise(Mallard()),
                "turkey": adapted,
                "turkey_flights": turkey.flights,
            },
        )
