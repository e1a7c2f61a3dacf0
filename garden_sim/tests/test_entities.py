import unittest
from garden_sim.entities import (
    Plant, PlantKind, PlantState, Harvested, PLANT_CATALOG,
    growth_points, plant_info
)
from garden_sim.errors import UnknownPlantKind, UnknownGrowthModel
from garden_sim.weather import Weather, WeatherInfo


class FixedWeather:
    def __init__(self, temperature):
        self.temperature = temperature

    def on(self, now):
        return WeatherInfo(self.temperature)


class FakeWorld:
    def __init__(self, temperature):
        self.weather = FixedWeather(temperature)


class TestPlantLifecycle(unittest.TestCase):
    def test_kale_stages_by_time(self):
        kale = Plant(0, "kale")
        self.assertEqual(kale.state(10), PlantState.GERMINATING)
        self.assertEqual(kale.state(25), PlantState.GROWING)
        self.assertEqual(kale.state(35), PlantState.PRODUCING)
        self.assertEqual(kale.state(85), PlantState.DEAD)

    def test_thresholds_are_exclusive(self):
        tomato = Plant(0, "tomato")
        self.assertEqual(tomato.state(10), PlantState.GERMINATING)
        self.assertEqual(tomato.state(50), PlantState.GROWING)
        self.assertEqual(tomato.state(100), PlantState.PRODUCING)
        self.assertEqual(tomato.state(100.5), PlantState.DEAD)

    def test_before_planting_is_germinating(self):
        plant = Plant(100, "tomato")
        self.assertEqual(plant.state(0), PlantState.GERMINATING)

    def test_state_is_monotonic(self):
        for kind in PlantKind:
            plant = Plant(0, kind)
            ranks = [plant.state(now).rank for now in range(-10, 150)]
            self.assertEqual(ranks, sorted(ranks), kind)

    def test_dead_is_absorbing(self):
        plant = Plant(0, "kale")
        for now in range(81, 1000, 7):
            self.assertEqual(plant.state(now), PlantState.DEAD)

    def test_unknown_kind(self):
        with self.assertRaises(UnknownPlantKind):
            Plant(0, "corn")
        with self.assertRaises(UnknownPlantKind):
            plant_info("corn")

    def test_unknown_growth_model(self):
        with self.assertRaises(UnknownGrowthModel):
            Plant(0, "kale").state(5, "moon")


class TestScoreGrowth(unittest.TestCase):
    def test_growth_points_brackets(self):
        self.assertEqual(growth_points(50), 1)
        self.assertEqual(growth_points(60), 1)
        self.assertEqual(growth_points(61), 2)
        self.assertEqual(growth_points(80), 2)
        self.assertEqual(growth_points(85), 3)

    def test_tick_adds_points_from_weather(self):
        plant = Plant(0, "kale")
        plant.tick(FakeWorld(70), 1)
        plant.tick(FakeWorld(90), 2)
        plant.tick(FakeWorld(40), 3)
        self.assertEqual(plant.points, 6)

    def test_score_model_follows_points(self):
        kale = Plant(0, "kale")
        world = FakeWorld(70)
        for now in range(1, 11):
            kale.tick(world, now)
        # 20 points: not past germination yet
        self.assertEqual(kale.state(10, "score"), PlantState.GERMINATING)
        kale.tick(world, 11)
        self.assertEqual(kale.state(11, "score"), PlantState.GROWING)
        for now in range(12, 17):
            kale.tick(world, now)
        self.assertEqual(kale.points, 32)
        self.assertEqual(kale.state(16, "score"), PlantState.PRODUCING)

    def test_score_model_dies_by_time(self):
        kale = Plant(0, "kale")
        self.assertEqual(kale.state(81, "score"), PlantState.DEAD)

    def test_missed_ticks_stall_score_growth(self):
        kale = Plant(0, "kale")
        self.assertEqual(kale.state(50, "score"), PlantState.GERMINATING)
        self.assertEqual(kale.state(50, "time"), PlantState.PRODUCING)


class TestHarvested(unittest.TestCase):
    def test_snapshot_is_detached(self):
        plant = Plant(0, "tomato", points=5)
        record = Harvested(60, plant.snapshot())
        plant.points = 99
        self.assertEqual(record.plant.points, 5)
        self.assertEqual(record.harvested_on, 60)
        with self.assertRaises(AttributeError):
            record.harvested_on = 1

    def test_catalog_is_read_only(self):
        self.assertEqual(PLANT_CATALOG[PlantKind.KALE].life_span, 80)
        with self.assertRaises(TypeError):
            PLANT_CATALOG["corn"] = PLANT_CATALOG[PlantKind.KALE]


class TestWeather(unittest.TestCase):
    def test_same_time_same_temperature(self):
        weather = Weather()
        for now in (0, 12.5, 86400 * 200, 1577836800.0):
            self.assertEqual(weather.on(now).temperature, weather.on(now).temperature)

    def test_independent_instances_agree(self):
        self.assertEqual(Weather(seed=7).on(3600), Weather(seed=7).on(3600))

    def test_temperature_stays_plausible(self):
        weather = Weather()
        temps = [weather.on(t).temperature for t in range(0, 86400 * 365, 3600 * 7)]
        self.assertGreater(min(temps), 0)
        self.assertLess(max(temps), 120)
        # Every growth bracket is reachable
        self.assertEqual({growth_points(t) for t in temps}, {1, 2, 3})


if __name__ == '__main__':
    unittest.main()
