# test_renderers.py v1.0
# Unit tests for the annulus, legend, inset and polar renderers.
# All drawing happens on the non-interactive Agg backend.

import unittest
import numpy as np
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
from termcolor import cprint

from field import sample_field
from layout import LayoutConfig
from color_mapper import ColorMapper
from annulus_renderer import build_wedges, wedge_bounds, draw_annulus, setup_pixel_axes
from legend_renderer import legend_ticks, gradient_image, draw_legend
from inset_renderer import inset_curve, format_annotation, draw_inset, INSET_SAMPLES
from polar_renderer import polar_series, format_angle_tick, draw_polar

class TestRenderers(unittest.TestCase):
    """A suite of tests for every drawing component."""

    @classmethod
    def setUpClass(cls):
        cls.layout = LayoutConfig.fixed()
        cls.mapper = ColorMapper()

    def setUp(self):
        cprint(f"\n--- Running test: {self._testMethodName} ---", 'yellow')
        self.fig = plt.figure(figsize=self.layout.figsize, dpi=self.layout.dpi)

    def tearDown(self):
        plt.close(self.fig)

    def test_01_wedge_coverage(self):
        """Wedges tile [0, 2pi) exactly, with shared boundaries and no gaps."""
        cprint("  -> Testing wedge coverage for several N...", 'cyan')
        for n in (1, 3, 7, 400):
            samples = sample_field(0.3, n)
            wedges = build_wedges(samples, self.layout)
            self.assertEqual(len(wedges), n)
            self.assertEqual(wedges[0].theta_start, 0.0)
            self.assertEqual(wedges[-1].theta_end, 2 * np.pi)
            for left, right in zip(wedges, wedges[1:]):
                self.assertEqual(left.theta_end, right.theta_start)
                self.assertLess(left.theta_start, left.theta_end)
            # Each wedge starts at the angle its value was sampled at.
            np.testing.assert_array_equal([w.theta_start for w in wedges], samples.angles)
            np.testing.assert_array_equal([w.value for w in wedges], samples.values)
        with self.assertRaises(ValueError):
            wedge_bounds(0)
        cprint("Test Passed: Wedges cover the full circle.", 'green')

    def test_02_draw_annulus(self):
        """One patch collection of N wedges plus two boundary circles."""
        cprint("  -> Testing draw_annulus...", 'cyan')
        ax = self.fig.add_axes([0, 0, 1, 1])
        setup_pixel_axes(ax, self.layout)
        samples = sample_field(0.3)
        vrange = samples.range
        colors = draw_annulus(ax, samples, vrange, self.layout, self.mapper)

        self.assertEqual(colors.shape, (400, 4))
        self.assertEqual(len(ax.collections), 1)
        self.assertEqual(len(ax.collections[0].get_paths()), 400)
        self.assertEqual(len(ax.patches), 2)
        self.assertEqual(tuple(colors[np.argmin(samples.values)]), self.mapper.color(0.0))
        self.assertEqual(tuple(colors[np.argmax(samples.values)]), self.mapper.color(1.0))
        self.assertEqual(ax.get_ylim(), (600.0, 0.0))
        cprint("Test Passed: Annulus drawn with the mapped colors.", 'green')

    def test_03_degenerate_annulus(self):
        """A constant field paints every wedge with the midpoint color."""
        cprint("  -> Testing the constant field at xi = 2...", 'cyan')
        ax = self.fig.add_axes([0, 0, 1, 1])
        samples = sample_field(2.0)
        colors = draw_annulus(ax, samples, samples.range, self.layout, self.mapper)
        midpoint = np.array(self.mapper.color(0.5))
        self.assertTrue(np.all(colors == midpoint))
        cprint("Test Passed: Degenerate range is handled.", 'green')

    def test_04_legend(self):
        """Five two-decimal ticks from min (bottom) to max (top)."""
        cprint("  -> Testing the legend...", 'cyan')
        positions, labels = legend_ticks(0.0, 1.0)
        np.testing.assert_allclose(positions, [0.0, 0.25, 0.5, 0.75, 1.0])
        self.assertEqual(labels, ['0.00', '0.25', '0.50', '0.75', '1.00'])
        _, flat = legend_ticks(1 / 3, 1 / 3)
        self.assertEqual(flat, ['0.33'] * 5)

        image = gradient_image(self.mapper)
        self.assertEqual(image.shape, (101, 1, 4))
        self.assertEqual(tuple(image[0, 0]), self.mapper.color(0.0))
        self.assertEqual(tuple(image[-1, 0]), self.mapper.color(1.0))

        ax = draw_legend(self.fig, (1.0, 3.0), self.layout, self.mapper)
        self.fig.canvas.draw()
        drawn = [t.get_text() for t in ax.get_yticklabels()]
        self.assertEqual(drawn, ['1.00', '1.50', '2.00', '2.50', '3.00'])
        cprint("Test Passed: Legend follows the current range.", 'green')

    def test_05_inset(self):
        """Fixed axes, 200-point curve, 3-decimal annotation."""
        cprint("  -> Testing the inset curve...", 'cyan')
        xs, ys = inset_curve()
        self.assertEqual(len(xs), INSET_SAMPLES)
        self.assertEqual((xs[0], xs[-1]), (0.0, 3.0))
        self.assertAlmostEqual(ys[0], 1.0)
        self.assertEqual(format_annotation(1.0), "0.000")
        self.assertEqual(format_annotation(3.0), "4.000")

        ax = draw_inset(self.fig, 1.0, self.layout)
        self.assertEqual(ax.get_xlim(), (0.0, 3.0))
        self.assertEqual(ax.get_ylim(), (0.0, 4.0))
        self.assertEqual([t.get_text() for t in ax.texts], ["0.000"])
        cprint("Test Passed: Inset curve and annotation are correct.", 'green')

    def test_06_polar(self):
        """Radar view starts at the top, runs clockwise and labels quarter turns."""
        cprint("  -> Testing the polar renderer...", 'cyan')
        angles, radii = polar_series(2.0)
        self.assertEqual(len(angles), len(radii))
        np.testing.assert_allclose(radii, 1 / 3)
        self.assertEqual(format_angle_tick(np.pi), 'π')
        self.assertEqual(format_angle_tick(np.pi / 2), 'π/2')
        self.assertEqual(format_angle_tick(1.0), '')

        ax, _ = draw_polar(self.fig, 0.3, self.layout)
        self.assertEqual(ax.get_theta_direction(), -1)
        self.assertAlmostEqual(ax.get_theta_offset(), np.pi / 2)
        self.assertEqual(ax.get_ylim()[0], 0.0)
        self.assertGreater(ax.get_ylim()[1], 1.0)
        cprint("Test Passed: Polar plot is oriented correctly.", 'green')

# --- This allows running the tests directly from the command line ---
if __name__ == "__main__":
    unittest.main(verbosity=2)
