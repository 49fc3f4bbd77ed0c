"""
pygame host for the orbit visuals.

Owns the window, translates keyboard and mouse input into session
commands and runs exactly one session tick per displayed frame.
"""

import sys
from pathlib import Path

import numpy as np
import pygame

from soundorbit.audio.microphone import MicrophoneInput
from soundorbit.config import OrbitConfig
from soundorbit.errors import AudioAcquisitionError
from soundorbit.io.snapshot import save_snapshot
from soundorbit.session import Session, SessionState
from soundorbit.visualizers.canvas import Canvas
from soundorbit.visualizers.orbit import OrbitRenderer

CONTROLS_HINT = "ENTER / click: start    SPACE: pause    S: save    ESC: quit"


class OrbitApp:
    """Window, input handling and frame scheduling."""

    def __init__(
        self,
        config: OrbitConfig | None = None,
        seed: int | None = None,
        snapshot_dir: Path = Path("."),
        quiet: bool = False,
    ):
        self.config = config or OrbitConfig()
        self.snapshot_dir = Path(snapshot_dir)
        self.quiet = quiet

        self.microphone = MicrophoneInput(self.config)
        self.session = Session(
            self.microphone,
            self.config,
            rng=np.random.default_rng(seed),
            on_error=self._on_audio_error,
            on_start=self._on_audio_start,
        )
        self.renderer = OrbitRenderer(self.config)

        self.screen: pygame.Surface | None = None
        self.canvas: Canvas | None = None
        self.font: pygame.font.Font | None = None
        self.notice: str | None = None
        self.running = False

    def _info(self, message: str):
        if not self.quiet:
            print(message, flush=True)

    def _on_audio_start(self):
        self.canvas.clear()
        self._info(f"Microphone started ({self.microphone.describe()})")

    def _on_audio_error(self, error: AudioAcquisitionError):
        print(f"Error: {error}", file=sys.stderr)
        self.notice = str(error)

    def _open_window(self):
        cfg = self.config
        flags = pygame.FULLSCREEN if cfg.fullscreen else pygame.RESIZABLE
        size = (0, 0) if cfg.fullscreen else (cfg.width, cfg.height)
        self.screen = pygame.display.set_mode(size, flags)
        pygame.display.set_caption("Sound Orbit")
        self.canvas = Canvas(*self.screen.get_size(), surface=self.screen)
        self.font = pygame.font.Font(None, 26)

    def _resize(self):
        self.screen = pygame.display.get_surface()
        self.canvas.resize(*self.screen.get_size(), surface=self.screen)

    def _draw_text(self, text: str, y: float, gray: int = 200):
        label = self.font.render(text, True, (gray, gray, gray))
        cx, cy = self.canvas.center
        self.screen.blit(label, label.get_rect(center=(cx, cy + y)))

    def _draw_idle(self):
        self.canvas.clear()
        self._draw_text("Sound Orbit", -20, 230)
        self._draw_text(CONTROLS_HINT, 20, 140)

    def _draw_notice(self):
        """Blocking error panel; any key or click dismisses it."""
        self.canvas.clear()
        self._draw_text(self.notice, -20, 230)
        self._draw_text("Press any key to continue", 20, 140)

    def save(self):
        path = save_snapshot(self.canvas, self.snapshot_dir, self.config.snapshot_prefix)
        self._info(f"Saved snapshot: {path}")

    def toggle_pause(self):
        if self.session.state in (SessionState.RUNNING, SessionState.PAUSED):
            paused = self.session.toggle_pause()
            self._info("Paused" if paused else "Resumed")

    def handle_event(self, event: pygame.event.Event):
        """Translate one pygame event into a session command."""
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type in (pygame.VIDEORESIZE, pygame.WINDOWSIZECHANGED):
            self._resize()
        elif self.notice is not None:
            if event.type in (pygame.KEYDOWN, pygame.MOUSEBUTTONDOWN):
                self.notice = None
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                self.session.start()
            elif event.key in (pygame.K_SPACE, pygame.K_p):
                self.toggle_pause()
            elif event.key == pygame.K_s:
                self.save()
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.session.start()

    def step(self):
        """Draw one displayed frame."""
        if self.notice is not None:
            self._draw_notice()
        elif self.session.state is SessionState.IDLE:
            self._draw_idle()
        else:
            result = self.session.tick()
            if result is not None:
                self.renderer.render(self.canvas, result)

    def run(self, autostart: bool = False):
        """Open the window and loop until quit."""
        pygame.init()
        try:
            self._open_window()
            clock = pygame.time.Clock()
            self.running = True

            if autostart:
                self.session.start()

            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)
                self.step()
                pygame.display.flip()
                clock.tick(self.config.fps)
        finally:
            self.microphone.stop()
            pygame.quit()
