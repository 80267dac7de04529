from __future__ import annotations
import pygame
from typing import List, Optional, Tuple
from models import X, CPU, HUMAN, WON
from engine import Engine


THEMES = {
    "light": {
        "bg": (240, 240, 240),
        "grid": (200, 180, 140),
        "border": (160, 130, 70),
        "piece_x": (30, 30, 30),
        "piece_o": (220, 170, 60),
        "win": (120, 200, 140),
        "hud_bg": (255, 255, 255, 220),
        "shadow": (220, 200, 140),
        "accent": (220, 170, 60),
        "text": (30, 30, 30)
    },
    "dark": {
        "bg": (32, 36, 46),
        "grid": (90, 100, 110),
        "border": (60, 70, 80),
        "piece_x": (240, 240, 240),
        "piece_o": (255, 215, 100),
        "win": (70, 140, 95),
        "hud_bg": (48, 53, 65, 220),
        "shadow": (60, 70, 80),
        "accent": (255, 215, 100),
        "text": (220, 220, 220)
    }
}

KEY_HELP = "N new round   S swap starter   R reset match   M mode   T theme   <- -> history"


class UI:
    def __init__(self, engine: Engine, theme: str = "light", fps: int = 60):
        pygame.init()

        self.engine = engine
        self.fps = fps
        self.cell = 120  # px
        self.margin_top = 124
        self.margin_bottom = 60
        self.margin_left = 40
        self.history_w = 240

        self.theme_name = theme if theme in THEMES else "light"
        self.theme = THEMES[self.theme_name]

        self.W = self.margin_left * 2 + self.cell * 3 + self.history_w
        self.H = self.margin_top + self.cell * 3 + self.margin_bottom
        try:
            self.screen = pygame.display.set_mode((self.W, self.H), pygame.RESIZABLE)
        except pygame.error as e:
            print(f"[UI] Resizable window unavailable: {e}")
            self.screen = pygame.display.set_mode((self.W, self.H))

        pygame.display.set_caption("Tic Tac Toe")
        self.clock = pygame.time.Clock()
        self.font_small = pygame.font.SysFont("consolas", 16)
        self.font = pygame.font.SysFont("consolas", 19, bold=True)
        self.font_big = pygame.font.SysFont("consolas", 23, bold=True)
        self.font_piece = pygame.font.SysFont("consolas", 84, bold=True)
        self.message: Optional[str] = None
        self.message_t = 0.0

        # --- reset-match confirmation modal ---
        self._confirming = False
        self._confirm_yes_rect = None
        self._confirm_no_rect = None
        self._leave_requested = False

        self._history_rects: List[Tuple[pygame.Rect, int]] = []

    # ==== confirmation modal ====
    def _request_reset(self):
        self._confirming = True
        btn_w, btn_h, spacing = 140, 50, 30
        win_w, win_h = self.screen.get_size()
        cx, cy = win_w // 2, win_h // 2 + 10
        self._confirm_yes_rect = pygame.Rect(cx - btn_w - spacing // 2, cy, btn_w, btn_h)
        self._confirm_no_rect = pygame.Rect(cx + spacing // 2, cy, btn_w, btn_h)

    def _cancel_confirm(self):
        self._confirming = False
        self._confirm_yes_rect = None
        self._confirm_no_rect = None

    def _confirm_yes(self):
        self._cancel_confirm()
        self.engine.reset_match()
        self.note("Match reset.")

    def _draw_confirm_modal(self):
        if not self._confirming:
            return

        win_w, win_h = self.screen.get_size()
        dim = pygame.Surface((win_w, win_h), pygame.SRCALPHA)
        dim.fill((0, 0, 0, 140))
        self.screen.blit(dim, (0, 0))

        box_w, box_h = 420, 200
        box = pygame.Rect((win_w - box_w) // 2, (win_h - box_h) // 2, box_w, box_h)
        panel = pygame.Surface((box_w, box_h), pygame.SRCALPHA)
        bg = self.theme["hud_bg"]
        panel.fill((bg[0], bg[1], bg[2], 235))
        self.screen.blit(panel, box.topleft)
        pygame.draw.rect(self.screen, self.theme["accent"], box, width=3, border_radius=14)

        title = self.font_big.render("Reset match?", True, self.theme["text"])
        msg = self.font_small.render("Scores go back to zero.", True, self.theme["text"])
        self.screen.blit(title, title.get_rect(center=(box.centerx, box.y + 40)))
        self.screen.blit(msg, msg.get_rect(center=(box.centerx, box.y + 72)))

        mouse = pygame.mouse.get_pos()
        for rect, label in ((self._confirm_yes_rect, "Yes"), (self._confirm_no_rect, "No")):
            hover = rect.collidepoint(mouse)
            pygame.draw.rect(self.screen, self.theme["accent"] if hover else self.theme["grid"], rect, border_radius=10)
            txt = self.font.render(label, True, self._contrast_text_for(self.theme["accent"]))
            self.screen.blit(txt, txt.get_rect(center=rect.center))

    # ==== layout ====
    def board_rect(self) -> pygame.Rect:
        win_w, win_h = self.screen.get_size()
        size = self.cell * 3
        x = max(self.margin_left, (win_w - self.history_w - size) // 2)
        y = self.margin_top + max(0, (win_h - self.margin_top - self.margin_bottom - size) // 2)
        return pygame.Rect(x, y, size, size)

    def pixel_to_cell(self, x: int, y: int) -> Optional[int]:
        r = self.board_rect()
        if not r.collidepoint(x, y):
            return None
        col = (x - r.x) // self.cell
        row = (y - r.y) // self.cell
        return int(row * 3 + col)

    # ==== drawing ====
    def draw_grid(self) -> None:
        r = self.board_rect()
        shadow_rect = pygame.Rect(r.x + 8, r.y + 8, r.w, r.h)
        pygame.draw.rect(self.screen, self.theme["shadow"], shadow_rect, border_radius=8)
        pygame.draw.rect(self.screen, self.theme["grid"], r, border_radius=8)

        snap = self.engine.snapshot()
        if snap.outcome.status == WON:
            for i in snap.outcome.line:
                cell = pygame.Rect(r.x + (i % 3) * self.cell, r.y + (i // 3) * self.cell, self.cell, self.cell)
                pygame.draw.rect(self.screen, self.theme["win"], cell.inflate(-6, -6), border_radius=8)

        for i in range(1, 3):
            y = r.y + i * self.cell
            pygame.draw.line(self.screen, self.theme["border"], (r.x, y), (r.x + r.w, y), 3)
            x = r.x + i * self.cell
            pygame.draw.line(self.screen, self.theme["border"], (x, r.y), (x, r.y + r.h), 3)
        pygame.draw.rect(self.screen, self.theme["border"], r, 4, border_radius=8)

    def draw_pieces(self) -> None:
        r = self.board_rect()
        for i, v in enumerate(self.engine.board):
            if v is None:
                continue
            color = self.theme["piece_x"] if v == X else self.theme["piece_o"]
            surf = self.font_piece.render(v, True, color)
            center = (r.x + (i % 3) * self.cell + self.cell // 2, r.y + (i // 3) * self.cell + self.cell // 2)
            self.screen.blit(surf, surf.get_rect(center=center))

    def draw_hud(self, dt: float) -> None:
        snap = self.engine.snapshot()
        win_w, _ = self.screen.get_size()
        hud_rect = pygame.Rect(8, 8, win_w - 16, self.margin_top - 16)
        surf = pygame.Surface((hud_rect.w, hud_rect.h), pygame.SRCALPHA)
        surf.fill(self.theme["hud_bg"])
        self.screen.blit(surf, hud_rect)

        # --- score bar ---
        sc = snap.scores
        score_text = f"X: {sc.x}     Draw: {sc.draws}     O: {sc.o}"
        score_surf = self.font_big.render(score_text, True, self.theme["text"])
        self.screen.blit(score_surf, score_surf.get_rect(center=(win_w // 2, hud_rect.y + 22)))

        # --- mode / starter / status ---
        mode = "Vs Computer" if snap.config.mode == CPU else "2 Players"
        thinking = "   (thinking...)" if snap.cpu_pending else ""
        info = f"{mode}     Starter: {snap.config.starter}     {snap.status}{thinking}"
        info_surf = self.font.render(info, True, self.theme["accent"])
        self.screen.blit(info_surf, info_surf.get_rect(center=(win_w // 2, hud_rect.y + 54)))

        # --- transient message ---
        if self.message:
            self.message_t -= dt
            if self.message_t <= 0:
                self.message = None
            else:
                msg_surf = self.font_small.render(self.message, True, self.theme["text"])
                self.screen.blit(msg_surf, msg_surf.get_rect(center=(win_w // 2, hud_rect.y + 84)))

        help_surf = self.font_small.render(KEY_HELP, True, self.theme["text"])
        _, win_h = self.screen.get_size()
        self.screen.blit(help_surf, help_surf.get_rect(center=(win_w // 2, win_h - self.margin_bottom // 2)))

    def draw_history(self) -> None:
        snap = self.engine.snapshot()
        board = self.board_rect()
        x = board.right + 40
        y = board.y
        title = self.font.render("History", True, self.theme["text"])
        self.screen.blit(title, (x, y))
        y += 32

        self._history_rects = []
        for step, label in enumerate(snap.history_labels):
            rect = pygame.Rect(x, y, self.history_w - 40, 26)
            active = step == snap.step
            if active:
                pygame.draw.rect(self.screen, self.theme["accent"], rect, border_radius=6)
            else:
                pygame.draw.rect(self.screen, self.theme["border"], rect, 1, border_radius=6)
            color = self._contrast_text_for(self.theme["accent"]) if active else self.theme["text"]
            txt = self.font_small.render(label, True, color)
            self.screen.blit(txt, (rect.x + 8, rect.y + 4))
            self._history_rects.append((rect, step))
            y += 30

    def _contrast_text_for(self, rgb):
        r, g, b = rgb[:3]
        return (0, 0, 0) if (0.299 * r + 0.587 * g + 0.114 * b) > 150 else (255, 255, 255)

    def note(self, msg: str, t: float = 2.0):
        self.message = msg
        self.message_t = t

    # ==== input ====
    def _handle_key(self, key) -> None:
        if key == pygame.K_ESCAPE:
            self._leave_requested = True
        elif key == pygame.K_n:
            self.engine.new_round()
            self.note("New round.")
        elif key == pygame.K_s:
            self.engine.swap_starter()
            self.note(f"Starter: {self.engine.config.starter}")
        elif key == pygame.K_r:
            self._request_reset()
        elif key == pygame.K_m:
            self.engine.set_mode(HUMAN if self.engine.config.mode == CPU else CPU)
            self.note("Vs Computer" if self.engine.config.mode == CPU else "2 Players")
        elif key == pygame.K_t:
            self._toggle_theme()
        elif key == pygame.K_LEFT:
            self.engine.jump_to(self.engine.step - 1)
        elif key == pygame.K_RIGHT:
            self.engine.jump_to(self.engine.step + 1)

    def _handle_click(self, pos) -> None:
        if self._confirming:
            if self._confirm_yes_rect and self._confirm_yes_rect.collidepoint(pos):
                self._confirm_yes()
            elif self._confirm_no_rect and self._confirm_no_rect.collidepoint(pos):
                self._cancel_confirm()
            return

        for rect, step in self._history_rects:
            if rect.collidepoint(pos):
                self.engine.jump_to(step)
                return

        idx = self.pixel_to_cell(*pos)
        if idx is None or self.engine.snapshot().board_locked:
            return
        if not self.engine.apply_move(idx):
            self.note("Invalid move.")

    def _toggle_theme(self):
        self.theme_name = "dark" if self.theme_name == "light" else "light"
        self.theme = THEMES[self.theme_name]
        self.note(f"Theme: {self.theme_name}")

    def run(self):
        running = True
        while running:
            dt = self.clock.tick(self.fps) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False

                elif event.type == pygame.KEYDOWN and self._confirming:
                    if event.key in (pygame.K_RETURN, pygame.K_y):
                        self._confirm_yes()
                    elif event.key in (pygame.K_ESCAPE, pygame.K_n):
                        self._cancel_confirm()
                    continue  # modal eats key events

                elif event.type == pygame.KEYDOWN:
                    self._handle_key(event.key)

                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    self._handle_click(event.pos)

            # CPU move - paused while modal is open
            if not self._confirming and self.engine.tick(dt):
                self.note(f"CPU played {self._last_move_label()}")

            self.screen.fill(self.theme["bg"])
            self.draw_grid()
            self.draw_pieces()
            self.draw_hud(dt)
            self.draw_history()
            self._draw_confirm_modal()
            pygame.display.flip()

            if self._leave_requested:
                running = False

        pygame.quit()

    def _last_move_label(self) -> str:
        hist = self.engine.history
        if hist.step == 0:
            return "-"
        before, after = hist.boards[hist.step - 1], hist.boards[hist.step]
        for i in range(9):
            if before[i] != after[i]:
                return f"{after[i]} at ({i // 3 + 1},{i % 3 + 1})"
        return "-"
