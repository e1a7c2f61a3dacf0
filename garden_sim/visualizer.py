"""
Pygame-based Visualizer for the garden.

Read-only over the World except for the buttons, which call World commands
only when the matching can_* query allows it.
"""
import pygame
import sys
import time
from .config import (
    SCREEN_WIDTH, SCREEN_HEIGHT, FPS,
    BED_ORIGIN, SECTION_SIZE, BED_SPACING, PANEL_X
)
from .entities import PlantState

# Colors
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
GREEN = (0, 200, 0)
BLUE = (0, 0, 200)
GRAY = (200, 200, 200)
DARK_GRAY = (100, 100, 100)
RED = (200, 0, 0)
TAN = (210, 180, 140)
BROWN = (139, 69, 19)
LIGHT_GREEN = (144, 238, 144)

STATE_COLORS = {
    PlantState.GERMINATING: LIGHT_GREEN,
    PlantState.GROWING: GREEN,
    PlantState.PRODUCING: RED,
    PlantState.DEAD: DARK_GRAY,
}


def section_label(section, now):
    """Text shown inside a section."""
    state = section.state(now)
    if state is None or state == PlantState.GERMINATING:
        return "..."
    if state == PlantState.GROWING:
        return "sprout"
    if state == PlantState.PRODUCING:
        return section.item.kind.value
    return "dead"


class Button:
    def __init__(self, x, y, w, h, text, action_func, enabled_func=None):
        self.rect = pygame.Rect(x, y, w, h)
        self.text = text
        self.action_func = action_func
        self.enabled_func = enabled_func or (lambda: True)
        self.font = pygame.font.SysFont("Arial", 14, bold=True)
        self.is_hovered = False

    def draw(self, screen):
        enabled = self.enabled_func()
        color = GRAY if not self.is_hovered else DARK_GRAY
        pygame.draw.rect(screen, color, self.rect)
        pygame.draw.rect(screen, BLACK, self.rect, 2)
        text_surf = self.font.render(self.text, True, BLACK if enabled else DARK_GRAY)
        text_rect = text_surf.get_rect(center=self.rect.center)
        screen.blit(text_surf, text_rect)

    def handle_event(self, event):
        if event.type == pygame.MOUSEMOTION:
            self.is_hovered = self.rect.collidepoint(event.pos)
        if event.type == pygame.MOUSEBUTTONDOWN:
            if self.is_hovered and event.button == 1 and self.enabled_func():
                self.action_func()


class Visualizer:
    def __init__(self, sim_instance, scenario_name="Simulation"):
        self.sim = sim_instance
        self.world = sim_instance.world
        self.scenario_name = scenario_name

        pygame.init()
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("My Garden")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Arial", 16)
        self.small_font = pygame.font.SysFont("Arial", 11)
        self.title_font = pygame.font.SysFont("Arial", 24, bold=True)

        # Redraw only when the world reports a change
        self.dirty = True
        self._unsubscribe = self.world.subscribe(self._on_change)

        now = lambda: self.sim.now
        self.buttons = [
            Button(PANEL_X, 90, 160, 32, "add bed", self.world.add_bed),
            Button(PANEL_X, 130, 160, 32, "plant kale",
                   lambda: self.world.plant(now(), "kale"),
                   lambda: self.world.can_plant(now())),
            Button(PANEL_X, 170, 160, 32, "plant tomato",
                   lambda: self.world.plant(now(), "tomato"),
                   lambda: self.world.can_plant(now())),
            Button(PANEL_X, 210, 160, 32, "harvest",
                   lambda: self.world.harvest(now()),
                   lambda: self.world.can_harvest(now())),
        ]

        self.running = True

    def _on_change(self, world):
        self.dirty = True

    def close(self):
        self._unsubscribe()
        self.running = False
        pygame.quit()

    def show_transition_screen(self, message, duration=2.0):
        """Show a transition screen with a message."""
        start_time = time.time()
        while time.time() - start_time < duration:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                    return
            self.screen.fill(BLACK)
            text = self.title_font.render(message, True, WHITE)
            text_rect = text.get_rect(center=(SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2))
            self.screen.blit(text, text_rect)
            pygame.display.flip()
            time.sleep(0.016)

    def process_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT or (event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE):
                self.sim.stop()
                self.close()
                sys.exit()
            for button in self.buttons:
                button.handle_event(event)

    def update(self):
        if not self.running:
            return

        self.process_events()
        if not self.dirty:
            return
        self.dirty = False

        now = self.sim.now
        self.screen.fill(WHITE)

        title = self.title_font.render("my garden", True, BLACK)
        self.screen.blit(title, (10, 10))

        # Date and weather
        date_text = self.font.render(self.world.date(now).strftime("%Y-%m-%d %H:%M"), True, BLACK)
        self.screen.blit(date_text, (10, 45))
        temperature = self.world.weather.on(now).temperature
        temp_text = self.font.render(f"{temperature:.1f} F", True, BLUE)
        self.screen.blit(temp_text, (200, 45))

        scenario_text = self.font.render(self.scenario_name, True, BLUE)
        self.screen.blit(scenario_text, (SCREEN_WIDTH - 260, 10))

        for index, bed in enumerate(self.world.beds):
            self.draw_bed(bed, index, now)

        for button in self.buttons:
            button.draw(self.screen)

        self.draw_store()

        pygame.display.flip()
        self.clock.tick(FPS)

    def draw_bed(self, bed, index, now):
        x0 = BED_ORIGIN[0]
        y0 = BED_ORIGIN[1] + index * (SECTION_SIZE + BED_SPACING)
        outline = pygame.Rect(x0, y0, SECTION_SIZE * len(bed.sections), SECTION_SIZE)
        pygame.draw.rect(self.screen, TAN, outline)

        for i, section in enumerate(bed.sections):
            rect = pygame.Rect(x0 + i * SECTION_SIZE, y0, SECTION_SIZE, SECTION_SIZE)
            state = section.state(now)
            if state is not None:
                pygame.draw.rect(self.screen, STATE_COLORS[state], rect.inflate(-4, -4))
            text = self.small_font.render(section_label(section, now), True, BLACK)
            self.screen.blit(text, text.get_rect(center=rect.center))

        pygame.draw.rect(self.screen, BROWN, outline, 1)

    def draw_store(self):
        y = 260
        for kind, count in self.world.store_counts().items():
            text = self.font.render(f"{kind}: {count}", True, BLACK)
            self.screen.blit(text, (PANEL_X, y))
            y += 22
