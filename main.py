"""
Vector Playground - Bouncing Balls Demo

Entry point for the physics playground that exercises the Vector2 types the
way a game does:
- Ball positions and velocities read back from pymunk as Vector2f
- Speed limiting through length / normalize / in-place scaling
- Mouse clicks push every ball toward the cursor
- Velocity arrows and an FPS counter drawn each frame

Controls: left click pushes balls toward the cursor, BACKSPACE resets,
V toggles velocity arrows, ESC quits.
"""

import argparse
import random
import sys

import pygame
import pymunk

from arena.arena import Arena
from bodies.ball import Ball
from common.Vector2 import Vector2f
from config.framework_config import FrameworkConfig
from drawing.drawing import draw_fps, draw_velocity
from system.clock import Clock


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Vector2 bouncing balls playground")
    parser.add_argument("--balls", type=int, default=8, help="Number of balls to spawn")
    parser.add_argument("--fps", type=int, default=None, help="Target frame rate (default from config)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for spawn positions")
    parser.add_argument("--headless", action="store_true",
                        help="Run the physics without a window and print the final state")
    parser.add_argument("--seconds", type=float, default=5.0,
                        help="Simulated time for --headless runs")
    return parser.parse_args(argv)


def create_world(config: FrameworkConfig, ball_count: int, rng: random.Random):
    """Build the pymunk space, the arena walls and ball_count randomly pushed balls."""
    space = pymunk.Space()
    space.gravity = (0, 0)      # Top-down view
    space.damping = config.physics.SPACE_DAMPING

    arena = Arena(space, config.display, config.physics)

    margin = config.physics.BALL_RADIUS * 2
    balls = []
    for _ in range(ball_count):
        position = Vector2f(rng.uniform(margin, config.display.WIDTH - margin),
                            rng.uniform(margin, config.display.HEIGHT - margin))
        ball = Ball(position, space, config.display.BALL_COLOR, config.physics)
        ball.push(Vector2f(rng.uniform(-1, 1), rng.uniform(-1, 1)), config.physics.PUSH_STRENGTH)
        balls.append(ball)

    return space, arena, balls


def push_towards(balls, target: Vector2f, strength: float):
    for ball in balls:
        ball.push(target - ball.position(), strength)


def run_headless(space, arena, balls, seconds: float, fps: int):
    steps = int(seconds * fps)
    for _ in range(steps):
        space.step(1 / fps)
        for ball in balls:
            ball.simulate()

    inside = sum(1 for ball in balls if arena.contains(ball.position()))
    print(f"Simulated {steps} steps ({seconds:.1f}s at {fps} FPS)")
    for index, ball in enumerate(balls):
        print(f"  ball {index}: position={ball.position()} speed={ball.velocity().length:.1f}")
    print(f"{inside}/{len(balls)} balls inside the arena")
    return 0


def run_window(config: FrameworkConfig, space, arena, balls, fps: int):
    pygame.init()
    screen = pygame.display.set_mode((config.display.WIDTH, config.display.HEIGHT))
    pygame.display.set_caption("Vector2 Playground")
    font = pygame.font.SysFont("Arial", config.display.FONT_SIZE)

    frame_limiter = pygame.time.Clock()
    clock = Clock(config.clock)
    show_velocity = config.display.SHOW_VELOCITY

    # === MAIN LOOP ===
    while True:
        # === EVENT HANDLING ===
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit()
                return 0
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    pygame.quit()
                    return 0
                if event.key == pygame.K_BACKSPACE:
                    for ball in balls:
                        ball.reset()
                if event.key == pygame.K_v:
                    show_velocity = not show_velocity
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                push_towards(balls, Vector2f(event.pos), config.physics.PUSH_STRENGTH)

        # === PHYSICS SIMULATION ===
        space.step(1 / fps)
        for ball in balls:
            ball.simulate()

        # === RENDERING ===
        arena.draw(screen)
        for ball in balls:
            ball.draw(screen)
            if show_velocity:
                draw_velocity(screen, ball.position(), ball.velocity(),
                              config.display.VELOCITY_SCALE, config.display.VELOCITY_COLOR)
        draw_fps(screen, font, clock.get_current_fps(), config.display.TEXT_COLOR)

        pygame.display.flip()
        frame_limiter.tick(fps)


def main(argv=None):
    args = parse_args(argv)
    config = FrameworkConfig.create_headless() if args.headless else FrameworkConfig.create_default()
    fps = args.fps or config.display.FPS

    space, arena, balls = create_world(config, args.balls, random.Random(args.seed))
    print(f"Spawned {len(balls)} balls in a {config.display.WIDTH}x{config.display.HEIGHT} arena")

    if args.headless:
        return run_headless(space, arena, balls, args.seconds, fps)
    return run_window(config, space, arena, balls, fps)


if __name__ == "__main__":
    sys.exit(main())
