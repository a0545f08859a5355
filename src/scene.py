from __future__ import annotations

import os
import subprocess
from typing import List

from manim import DOWN, UP, FadeIn, MathTex, Scene, Text, Transform, config

from lexer import ParseError
from main import simplify_steps
from render import to_latex

EXPR_ENV = "POLYSIMP_EXPR"
DEFAULT_EXPR = "2x*3y + 4 - x + 3x - 4"


class SimplifyScene(Scene):
    def construct(self) -> None:
        expr = os.environ.get(EXPR_ENV, DEFAULT_EXPR)
        anim_run_time = 1.2
        final_wait = 2.0

        title = Text("Step: 0", font="Noto Sans", weight="BOLD")
        title.scale(0.45).to_edge(UP, buff=0.1)
        label = MathTex(to_latex(expr))
        self._fit_to_frame(label)
        self.play(FadeIn(title), FadeIn(label), run_time=anim_run_time)

        try:
            steps = simplify_steps(expr)
        except ParseError as exc:
            error = Text(f"Parse error: {exc}", font="Noto Sans")
            error.scale(0.6).next_to(label, DOWN, buff=0.6)
            self.play(FadeIn(error), run_time=anim_run_time)
            self.wait(final_wait)
            return

        for i, line in enumerate(steps, start=1):
            new_title = Text(f"Step: {i}", font="Noto Sans", weight="BOLD")
            new_title.scale(0.45).to_edge(UP, buff=0.1)
            new_label = MathTex(to_latex(line))
            self._fit_to_frame(new_label)
            self.play(
                Transform(title, new_title),
                Transform(label, new_label),
                run_time=anim_run_time,
            )

        self.wait(final_wait)

    def _fit_to_frame(self, mob: MathTex) -> None:
        max_width = config.frame_width * 0.9
        max_height = config.frame_height * 0.8
        if mob.width > max_width:
            mob.scale(max_width / mob.width)
        if mob.height > max_height:
            mob.scale(max_height / mob.height)
        mob.move_to([0, 0, 0])


def render_main() -> None:
    expr = input("Enter expression: ").strip() or DEFAULT_EXPR
    env = os.environ.copy()
    env[EXPR_ENV] = expr
    cmd: List[str] = ["manim", "-pqh", os.path.abspath(__file__), "SimplifyScene"]
    subprocess.run(cmd, check=False, env=env)


if __name__ == "__main__":
    render_main()
