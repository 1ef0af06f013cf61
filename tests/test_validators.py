import unittest

from data_prep.validators import clamp_inputs, validate_parameters
from engine.params import BusinessParameters


class TestValidateParameters(unittest.TestCase):
    def test_defaults_pass(self):
        result = validate_parameters(BusinessParameters())
        self.assertTrue(result.is_valid)
        self.assertIn("All checks passed", result.summary())

    def test_errors(self):
        p = BusinessParameters(startup_cost=-1, close_rate=1.5, max_crews=0)
        result = validate_parameters(p)
        self.assertFalse(result.is_valid)
        self.assertEqual(len(result.errors), 3)
        self.assertIn("ERRORS (3)", result.summary())

    def test_warnings(self):
        p = BusinessParameters(gross_revenue_per_job=1000, average_cost_per_job=1200, ad_spend_tier="Huge")
        result = validate_parameters(p)
        self.assertTrue(result.is_valid)
        self.assertTrue(any("loses money" in w for w in result.warnings))
        self.assertTrue(any("Unknown ad spend tier" in w for w in result.warnings))


class TestClampInputs(unittest.TestCase):
    def test_clamps(self):
        p = BusinessParameters()
        c = clamp_inputs(p, time_frame_months=1, ad_spend_tier="Huge")
        self.assertEqual(c.time_frame_months, 3)
        self.assertEqual(c.ad_spend_tier, "Moderate")
        c = clamp_inputs(p, time_frame_months=30, ad_spend_tier="Aggressive")
        self.assertEqual((c.time_frame_months, c.ad_spend_tier), (24, "Aggressive"))
        self.assertFalse(hasattr(c, "crew_count"))

if __name__ == '__main__':
    unittest.main()
