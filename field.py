# field.py v1.0
# Part of Xi Annulus: Interactive Field Viewer
# - Closed-form field r(xi, phi) = (1 + (xi - 2) cos^2(phi - pi/2))^2 / (xi^2 - xi + 1).
# - The two kernels behind the inset ratio curve.
# - Angular sampling and the (min, max) range reduction used by the colormap.

import numpy as np
from termcolor import cprint

# --- Parameter domain (matches the slider) ---
XI_MIN = 0.0
XI_MAX = 3.0
XI_STEP = 0.01

# Number of wedges in the annulus (smoothness of the ring)
N_ANGULAR = 400

# Angular step of the radar variant, in radians
POLAR_STEP = 0.01


def _denominator(xi):
    # xi^2 - xi + 1 has a negative discriminant, so it is > 0 for every real xi.
    return np.power(xi, 2) - xi + 1


def evaluate_field(xi, phi):
    """
    Evaluates the field at parameter `xi` and angle `phi` (radians).

    Both arguments may be floats or numpy arrays; numpy broadcasting applies.
    A scalar input returns a plain float.
    """
    cos_phi_squared = np.power(np.cos(phi - np.pi / 2), 2)
    numerator = np.power(1 + (xi - 2) * cos_phi_squared, 2)
    result = numerator / _denominator(xi)
    if np.ndim(result) == 0:
        return float(result)
    return result


def kernel_h(xi):
    """Horizontal kernel (xi^2 - 2 xi + 1) / (xi^2 - xi + 1)."""
    return (np.power(xi, 2) - 2 * xi + 1) / _denominator(xi)


def kernel_v(xi):
    """Vertical kernel 1 / (xi^2 - xi + 1)."""
    return 1 / _denominator(xi)


def kernel_ratio(xi):
    """
    Ratio kernel_h / kernel_v shown by the inset curve.

    Algebraically this is (xi - 1)^2, but it is evaluated through the two
    kernels so the annotated decimals follow the same floating-point path
    every time.
    """
    return kernel_h(xi) / kernel_v(xi)


def sample_angles(n: int = N_ANGULAR) -> np.ndarray:
    """Returns `n` angles i/n * 2pi covering the half-open interval [0, 2pi)."""
    if n < 1:
        raise ValueError("Number of angular samples must be positive.")
    return np.arange(n) / n * 2 * np.pi


def polar_angles(step: float = POLAR_STEP) -> np.ndarray:
    """Angles 0, step, 2*step, ... up to and including 2pi when it lands on the grid."""
    if step <= 0:
        raise ValueError("Angular step must be positive.")
    count = int(np.floor(2 * np.pi / step)) + 1
    return np.arange(count) * step


def value_range(values) -> tuple:
    """Linear scan returning (min, max) of a non-empty sample sequence."""
    values = np.asarray(values, dtype=float)
    if values.size == 0:
        raise ValueError("Cannot compute the range of an empty sample sequence.")
    return float(np.min(values)), float(np.max(values))


class AngularSamples:
    """
    A passive, read-only container for one full sweep of the field.

    Attributes:
        xi (float): The parameter the samples were computed for.
        angles (np.ndarray): Shape (n,), the starting angle of each sample.
        values (np.ndarray): Shape (n,), the field value at each angle.
    """
    def __init__(self, xi: float, angles: np.ndarray, values: np.ndarray):
        assert len(angles) == len(values), "Angles and values must have the same length."
        self.xi = float(xi)
        self.angles = np.asarray(angles, dtype=float)
        self.values = np.asarray(values, dtype=float)
        self.angles.setflags(write=False)
        self.values.setflags(write=False)

    def __len__(self):
        return len(self.values)

    @property
    def range(self) -> tuple:
        return value_range(self.values)


def sample_field(xi: float, n: int = N_ANGULAR) -> AngularSamples:
    """Regenerates the complete sample sequence for `xi`. Nothing is cached."""
    angles = sample_angles(n)
    return AngularSamples(xi, angles, evaluate_field(xi, angles))


# This block allows for independent testing of the module.
if __name__ == "__main__":
    cprint("\n--- Testing field.py v1.0 ---", 'yellow', attrs=['bold'])

    cprint("1. Known values...", 'cyan')
    cprint(f"   - r(0.3, 0)    = {evaluate_field(0.3, 0.0):.4f} (expected 1.2658)", 'grey')
    cprint(f"   - r(2.0, pi/2) = {evaluate_field(2.0, np.pi / 2):.4f} (expected 0.3333)", 'grey')

    cprint("2. Range for xi = 0 (constant field)...", 'cyan')
    samples = sample_field(0.0)
    cprint(f"   - range = {samples.range}", 'grey')

    cprint("3. Inset ratio at xi = 1...", 'cyan')
    cprint(f"   - ratio = {kernel_ratio(1.0):.3f}", 'grey')

    cprint("\n--- field.py self-check finished ---", 'yellow', attrs=['bold'])
