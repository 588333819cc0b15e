"""Match state and the per-tick simulation step.

`simulate_tick` advances one tick over explicitly passed state: the ball,
both paddles and a MatchState. It keeps nothing between calls.

`Match` bundles one match's state with its field geometry and random
source, and gives drivers the start/stop/tick/snapshot surface. Matches
share nothing, so any number can run side by side.
"""

import math
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from rally.logging import get_logger

from ..config import FieldGeometry
from ..difficulty import DifficultyProfile, get_difficulty_profile
from .entities import Ball, Paddle
from .events import FrameSnapshot, MatchEnded, MatchEvent, MatchPhase, PointScored, Side
from .opponent import track_ball
from .physics import (
    check_goal,
    check_opponent_paddle_collision,
    check_player_paddle_collision,
    deflect_off_opponent_paddle,
    deflect_off_player_paddle,
    reflect_off_walls,
)
from .random_source import RandomSource, create_random_source

log = get_logger('pong_match')

SERVE_ANGLE_RANGE = math.pi / 4  # Serves leave within +/-45 degrees

MatchListener = Callable[[MatchEvent], None]


@dataclass
class MatchState:
    """Scores, rally length and lifecycle of one match."""

    profile: Optional[DifficultyProfile] = None
    player_score: int = 0
    opponent_score: int = 0
    hit_count: int = 0
    phase: MatchPhase = MatchPhase.IDLE
    winner: Optional[Side] = None

    @property
    def running(self) -> bool:
        """True while ticks should be simulated."""
        return self.phase == MatchPhase.RUNNING

    def score_of(self, side: Side) -> int:
        """Current score of a side."""
        return self.player_score if side == Side.PLAYER else self.opponent_score

    def award_point(self, side: Side) -> int:
        """Add a point to a side.

        Returns:
            The side's new score
        """
        if side == Side.PLAYER:
            self.player_score += 1
        else:
            self.opponent_score += 1
        return self.score_of(side)

    def begin(self, profile: DifficultyProfile) -> None:
        """Reset for a fresh match at the given profile."""
        self.profile = profile
        self.player_score = 0
        self.opponent_score = 0
        self.hit_count = 0
        self.winner = None
        self.phase = MatchPhase.RUNNING


@dataclass
class TickResult:
    """What happened during one tick."""

    events: List[MatchEvent] = field(default_factory=list)
    wall_bounce: bool = False
    paddle_hit: Optional[Side] = None

    @property
    def point_scored(self) -> Optional[PointScored]:
        """The point scored this tick, if any."""
        for event in self.events:
            if isinstance(event, PointScored):
                return event
        return None

    @property
    def match_ended(self) -> Optional[MatchEnded]:
        """The match result produced this tick, if any."""
        for event in self.events:
            if isinstance(event, MatchEnded):
                return event
        return None


def serve_ball(
    ball: Ball,
    geometry: FieldGeometry,
    speed: float,
    rng: RandomSource,
    direction: Optional[int] = None,
) -> None:
    """Re-center the ball and launch it at a random angle.

    Args:
        ball: Ball to serve (mutated)
        geometry: Field geometry
        speed: Ball speed for the match
        rng: Source of the serve angle (and direction when not given)
        direction: +1 to serve right, -1 to serve left, None for random
    """
    angle = rng.uniform(-SERVE_ANGLE_RANGE, SERVE_ANGLE_RANGE)
    if direction is None:
        direction = 1 if rng.uniform(0.0, 1.0) > 0.5 else -1
    center_x, center_y = geometry.center
    ball.serve(center_x, center_y, speed, angle, direction)


def simulate_tick(
    ball: Ball,
    player: Paddle,
    opponent: Paddle,
    state: MatchState,
    geometry: FieldGeometry,
    rng: RandomSource,
) -> TickResult:
    """Advance the world by exactly one tick.

    Order: move the ball, bounce off walls, paddle collisions, goal
    check and scoring, then opponent tracking and clamping.

    Args:
        ball: Ball (mutated)
        player: Player paddle, already positioned from input
        opponent: Opponent paddle (mutated)
        state: Match state (mutated)
        geometry: Field geometry
        rng: Source of aiming noise and serve angles

    Returns:
        TickResult with the events and contacts of this tick
    """
    profile = state.profile
    if profile is None:
        raise RuntimeError("simulate_tick called before a match was started")

    result = TickResult()

    ball.move()

    result.wall_bounce = reflect_off_walls(ball, geometry.height)

    if check_player_paddle_collision(ball, player):
        deflect_off_player_paddle(ball, player)
        state.hit_count += 1
        result.paddle_hit = Side.PLAYER
        log.debug("Player return, rally at %d hits", state.hit_count)

    if check_opponent_paddle_collision(ball, opponent):
        deflect_off_opponent_paddle(ball, opponent)
        state.hit_count += 1
        result.paddle_hit = Side.OPPONENT
        log.debug("Opponent return, rally at %d hits", state.hit_count)

    scorer = check_goal(ball, geometry.width)
    if scorer is not None:
        _score_point(scorer, ball, state, geometry, rng, result)

    track_ball(opponent, ball, profile, rng)

    return result


def _score_point(
    scorer: Side,
    ball: Ball,
    state: MatchState,
    geometry: FieldGeometry,
    rng: RandomSource,
    result: TickResult,
) -> None:
    """Award a point, then either end the match or serve again."""
    profile = state.profile
    new_score = state.award_point(scorer)
    result.events.append(PointScored(
        side=scorer,
        player_score=state.player_score,
        opponent_score=state.opponent_score,
        hit_count=state.hit_count,
    ))
    log.debug("Point to %s (%d-%d)", scorer.value, state.player_score, state.opponent_score)

    if new_score >= profile.win_score:
        state.phase = MatchPhase.ENDED
        state.winner = scorer
        result.events.append(MatchEnded(
            winner=scorer,
            player_score=state.player_score,
            opponent_score=state.opponent_score,
            difficulty=profile.name,
        ))
        return

    # Serve toward the side that conceded
    direction = -1 if scorer == Side.OPPONENT else 1
    serve_ball(ball, geometry, profile.ball_speed, rng, direction)
    state.hit_count = 0


class Match:
    """One match: ball, paddles, state, field and randomness.

    Drivers call start() once a difficulty is chosen, feed the pointer
    position through set_player_target(), call tick() once per frame and
    draw from snapshot().
    """

    def __init__(
        self,
        geometry: Optional[FieldGeometry] = None,
        rng: Optional[RandomSource] = None,
    ):
        """Initialize an idle match.

        Args:
            geometry: Field geometry (default: from config)
            rng: Random source (default: unseeded random.Random)
        """
        self._geometry = geometry or FieldGeometry()
        self._rng = rng if rng is not None else create_random_source()
        self._state = MatchState()
        self._listeners: List[MatchListener] = []
        self._ticks = 0

        center_x, center_y = self._geometry.center
        self._ball = Ball(center_x, center_y, self._geometry.ball_radius)
        self._player = self._create_paddle(self._geometry.player_x)
        self._opponent = self._create_paddle(self._geometry.opponent_x)

    def _create_paddle(self, x: float) -> Paddle:
        paddle = Paddle(
            x,
            self._geometry.paddle_width,
            self._geometry.paddle_height,
            self._geometry.height,
        )
        paddle.center_vertically()
        return paddle

    @property
    def geometry(self) -> FieldGeometry:
        """Field geometry."""
        return self._geometry

    @property
    def ball(self) -> Ball:
        return self._ball

    @property
    def player(self) -> Paddle:
        return self._player

    @property
    def opponent(self) -> Paddle:
        return self._opponent

    @property
    def state(self) -> MatchState:
        return self._state

    @property
    def phase(self) -> MatchPhase:
        return self._state.phase

    @property
    def is_running(self) -> bool:
        return self._state.running

    @property
    def ticks(self) -> int:
        """Ticks simulated since the last start()."""
        return self._ticks

    def add_listener(self, listener: MatchListener) -> None:
        """Register a callback for PointScored and MatchEnded events."""
        self._listeners.append(listener)

    def remove_listener(self, listener: MatchListener) -> None:
        """Unregister a callback added with add_listener()."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def start(self, difficulty: str) -> DifficultyProfile:
        """Start a new match, discarding any match in progress.

        Args:
            difficulty: Difficulty key ('easy', 'medium', 'hard')

        Returns:
            The resolved profile

        Raises:
            UnknownDifficultyError: If difficulty is not a known tier
        """
        profile = get_difficulty_profile(difficulty)

        self._state.begin(profile)
        self._ticks = 0
        self._player.center_vertically()
        self._opponent.center_vertically()
        serve_ball(self._ball, self._geometry, profile.ball_speed, self._rng)

        log.info("Match started at %s (first to %d)", profile.name, profile.win_score)
        return profile

    def stop(self) -> None:
        """Halt ticking without resetting the match."""
        if self._state.phase != MatchPhase.RUNNING:
            return
        self._state.phase = MatchPhase.PAUSED
        log.info("Match paused at %d-%d", self._state.player_score, self._state.opponent_score)

    def resume(self) -> None:
        """Continue a paused match."""
        if self._state.phase != MatchPhase.PAUSED:
            return
        self._state.phase = MatchPhase.RUNNING
        log.info("Match resumed")

    def reset(self) -> None:
        """Drop the current match and go back to IDLE.

        The random source is kept, so a seeded session stays reproducible
        across matches.
        """
        self._state = MatchState()
        self._ticks = 0
        center_x, center_y = self._geometry.center
        self._ball = Ball(center_x, center_y, self._geometry.ball_radius)
        self._player.center_vertically()
        self._opponent.center_vertically()

    def set_player_target(self, pointer_y: float) -> None:
        """Center the player paddle on the pointer, clamped to the field.

        The latest value wins; the next tick reads wherever the paddle is.
        """
        self._player.center_on(pointer_y)

    def tick(self) -> TickResult:
        """Simulate one tick if the match is running.

        Returns:
            TickResult of the tick (empty if nothing was simulated)
        """
        if not self._state.running:
            return TickResult()

        self._ticks += 1
        result = simulate_tick(
            self._ball,
            self._player,
            self._opponent,
            self._state,
            self._geometry,
            self._rng,
        )
        log.trace("tick %d ball=%r", self._ticks, self._ball)

        ended = result.match_ended
        if ended is not None:
            log.info("Match over: %s wins %d-%d",
                     ended.winner.value, ended.player_score, ended.opponent_score)

        for event in result.events:
            for listener in list(self._listeners):
                listener(event)

        return result

    def snapshot(self) -> FrameSnapshot:
        """Renderable state of the current frame."""
        state = self._state
        return FrameSnapshot(
            ball_x=self._ball.x,
            ball_y=self._ball.y,
            ball_radius=self._ball.radius,
            player_x=self._player.x,
            player_y=self._player.y,
            opponent_x=self._opponent.x,
            opponent_y=self._opponent.y,
            paddle_width=self._geometry.paddle_width,
            paddle_height=self._geometry.paddle_height,
            player_score=state.player_score,
            opponent_score=state.opponent_score,
            hit_count=state.hit_count,
            phase=state.phase,
            difficulty=state.profile.name if state.profile else None,
            winner=state.winner,
        )
