from datetime import date, datetime, time

from my_garden.modules.plant_management.domain.models.plant import Plant
from my_garden.modules.plant_management.domain.services.watering_scheduler import WateringScheduler


def make_plant(**overrides) -> Plant:
    fields = {
        "name": "Fern",
        "watering_frequency_days": 7,
        "last_watered_date": date(2024, 1, 1),
    }
    fields.update(overrides)
    return Plant(**fields)


def test_weekly_plant_reminds_seven_days_after_last_watering():
    plant = make_plant()

    reminder = WateringScheduler().next_reminder(plant)

    assert reminder.fire_date == date(2024, 1, 8)
    assert reminder.id == plant.plant_id
    assert reminder.title == "Time to water 🌿 Fern"
    assert reminder.body == "Remember to water Fern today!"


def test_reminder_crosses_month_and_year():
    plant = make_plant(watering_frequency_days=30, last_watered_date=date(2024, 12, 15))

    assert WateringScheduler().next_reminder(plant).fire_date == date(2025, 1, 14)


def test_next_reminder_is_deterministic():
    plant = make_plant()
    scheduler = WateringScheduler()

    assert scheduler.next_reminder(plant) == scheduler.next_reminder(plant)


def test_custom_templates():
    scheduler = WateringScheduler(title_template="{name}!", body_template="Water {name}")

    reminder = scheduler.next_reminder(make_plant(name="Cactus"))

    assert reminder.title == "Cactus!"
    assert reminder.body == "Water Cactus"


def test_fire_at_combines_date_and_time():
    reminder = WateringScheduler().next_reminder(make_plant())

    assert reminder.fire_at(time(9, 0)) == datetime(2024, 1, 8, 9, 0)


def test_plant_next_watering_date_matches_reminder():
    plant = make_plant(watering_frequency_days=3)

    assert plant.next_watering_date == WateringScheduler().next_reminder(plant).fire_date
