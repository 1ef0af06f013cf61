import unittest

from analytics.scaling import (
    booking_targets,
    closed_form_trigger_day,
    crew_scaling_trigger,
    suggest_crew_addition,
)
from engine.interpolate import value_at
from engine.params import AGGRESSION_PROFILES, AGGRESSIVE, BusinessParameters, CrewSchedule
from engine.simulation import simulate, simulate_frame
from seasonality.base import SeasonalityTable


def one_job_a_day(**overrides):
    # $72/day -> 2 leads -> 1 booking/day; 14 jobs/week keeps capacity above bookings
    values = dict(
        base_jobs_per_week_per_crew=14,
        ad_spend_tiers={"Test": 72.0},
        ad_spend_tier="Test",
    )
    values.update(overrides)
    return BusinessParameters(**values)


class TestSimulatedTrigger(unittest.TestCase):
    def test_threshold_reached(self):
        p = one_job_a_day()
        s = simulate(p, horizon_days=60)
        trig = crew_scaling_trigger(s, AGGRESSIVE, CrewSchedule(), p)
        self.assertEqual(trig.day, 8)
        self.assertTrue(trig.reached)
        self.assertEqual(trig.mode, "simulated")
        self.assertAlmostEqual(trig.x, 8 / 30)
        self.assertAlmostEqual(trig.y, s.y[7])

    def test_counts_from_last_addition(self):
        p = one_job_a_day()
        schedule = CrewSchedule.of([10])
        s = simulate(p, schedule, horizon_days=60)
        trig = crew_scaling_trigger(s, AGGRESSIVE, schedule, p)
        # counting restarts on day 11; two crews still finish one job each per day
        self.assertEqual(trig.day, 18)

    def test_never_reached_clamps_to_horizon(self):
        p = one_job_a_day(ad_spend_tiers={"Off": 0.0}, ad_spend_tier="Off")
        s = simulate(p, horizon_days=45)
        trig = crew_scaling_trigger(s, AGGRESSIVE, CrewSchedule(), p)
        self.assertEqual(trig.day, 45)
        self.assertFalse(trig.reached)
        self.assertAlmostEqual(trig.y, value_at(s, 45 / 30))

    def test_seasonality_delays_trigger(self):
        p = one_job_a_day()
        table = SeasonalityTable.from_scores("SLOW", [0.0] + [1.0] * 11)
        s = simulate(p, seasonality=table, horizon_days=90)
        trig = crew_scaling_trigger(s, AGGRESSIVE, CrewSchedule(), p, table)
        self.assertEqual(trig.day, 38)


class TestClosedFormTrigger(unittest.TestCase):
    def test_closed_form_day(self):
        p = one_job_a_day()
        s = simulate(p, horizon_days=60)
        trig = crew_scaling_trigger(s, AGGRESSIVE, CrewSchedule(), p, mode="closed_form")
        self.assertEqual(trig.mode, "closed_form")
        self.assertEqual(trig.day, 4 * 14)

    def test_closed_form_clamps(self):
        p = one_job_a_day()
        self.assertIsNone(closed_form_trigger_day(4, p, horizon_days=30))
        s = simulate(p, horizon_days=30)
        trig = crew_scaling_trigger(s, AGGRESSIVE, CrewSchedule(), p, mode="closed_form")
        self.assertEqual(trig.day, 30)
        self.assertFalse(trig.reached)

    def test_closed_form_rounds_up(self):
        p = BusinessParameters(base_jobs_per_week_per_crew=2, ad_spend_tier="Aggressive")
        # 8 appointments at 75/36 * 0.5 per day
        self.assertEqual(closed_form_trigger_day(4, p, horizon_days=360), 8)

    def test_zero_rate(self):
        p = one_job_a_day(ad_spend_tiers={"Off": 0.0}, ad_spend_tier="Off")
        self.assertIsNone(closed_form_trigger_day(4, p, horizon_days=90))

    def test_falls_back_to_simulated(self):
        p = one_job_a_day()
        schedule = CrewSchedule.of([10])
        s = simulate(p, schedule, horizon_days=60)
        trig = crew_scaling_trigger(s, AGGRESSIVE, schedule, p, mode="closed_form")
        self.assertEqual(trig.mode, "simulated")

        table = SeasonalityTable.from_scores("FLAT", [1.0] * 12)
        trig = crew_scaling_trigger(s, AGGRESSIVE, CrewSchedule(), p, table, mode="closed_form")
        self.assertEqual(trig.mode, "simulated")


class TestSuggestions(unittest.TestCase):
    def test_suggest_adds_day_after_trigger(self):
        p = one_job_a_day()
        s = simulate(p, horizon_days=60)
        trig = crew_scaling_trigger(s, AGGRESSIVE, CrewSchedule(), p)
        self.assertEqual(suggest_crew_addition(trig, CrewSchedule(), p).days, (9,))

    def test_no_suggestion_at_cap(self):
        p = one_job_a_day(max_crews=2)
        schedule = CrewSchedule.of([5])
        s = simulate(p, schedule, horizon_days=60)
        trig = crew_scaling_trigger(s, AGGRESSIVE, schedule, p)
        self.assertIs(suggest_crew_addition(trig, schedule, p), schedule)

    def test_booking_targets_follow_backlog(self):
        p = BusinessParameters(base_jobs_per_week_per_crew=2.5, ad_spend_tier="Aggressive")
        frame = simulate_frame(p, horizon_days=180)
        s = simulate(p, horizon_days=180)
        targets = booking_targets(s, frame["backlog"].to_numpy(), p)
        self.assertEqual([t.label for t in targets], [pr.label for pr in AGGRESSION_PROFILES])
        self.assertEqual(targets[0].color, "red")
        # bookings 75/36 * 0.5 a day, one crew absorbs 2.5 jobs a week
        rate = 75 / 36 * 0.5 - 2.5 * (30 / 7) / 30
        for target, needed in zip(targets, [10, 20, 25]):
            self.assertAlmostEqual(target.day, needed / rate, places=6)
            self.assertAlmostEqual(target.x, target.day / 30)
            self.assertAlmostEqual(target.y, value_at(s, target.x))
            self.assertTrue(target.reached)
        self.assertAlmostEqual(targets[0].day, 14.61, places=2)
        self.assertAlmostEqual(targets[2].day, 36.52, places=2)

    def test_booking_targets_not_reached(self):
        p = one_job_a_day()
        frame = simulate_frame(p, horizon_days=60)
        s = simulate(p, horizon_days=60)
        targets = booking_targets(s, frame["backlog"].to_numpy(), p)
        self.assertEqual([t.day for t in targets], [60.0, 60.0, 60.0])
        self.assertFalse(any(t.reached for t in targets))
        self.assertAlmostEqual(targets[0].y, s.y[-1])

    def test_no_crews_never_triggers(self):
        p = one_job_a_day(max_crews=0)
        s = simulate(p, horizon_days=30)
        trig = crew_scaling_trigger(s, AGGRESSIVE, CrewSchedule(), p)
        self.assertEqual(trig.day, 30)
        self.assertFalse(trig.reached)

if __name__ == '__main__':
    unittest.main()
