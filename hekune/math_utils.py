#
# PROJECT: hekune
# MODULE: hekune/math_utils.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math
import sys
from decimal import Context, Decimal, ROUND_HALF_EVEN


class InvalidArgumentError(ValueError):
    """Malformed vector input or a non-vector where a vector is required."""


class OutOfRangeError(ValueError):
    """A numeric argument lies outside the range the operation accepts."""


class NormalizeError(ArithmeticError):
    """A vector has no direction that strict normalization can return."""


class ZeroMagnitudeError(NormalizeError):
    pass


class NaNMagnitudeError(NormalizeError):
    pass


class InfiniteMagnitudeError(NormalizeError):
    pass


THREE_COMPONENTS = "Sequence must contain exactly three components, (x, y, z)"
INTERPOLATION_RANGE = "Control parameter must be a value between 0 & 1"
NON_VECTOR_COMPARISON = "Cannot compare a vector to a non-vector"
NEGATIVE_MAGNITUDE = "The magnitude of a vector must be a positive value"
ORIGIN_VECTOR_MAGNITUDE = "Cannot change the magnitude of Vec3(0, 0, 0)"
NORMALIZE_0 = "Cannot normalize a vector when its magnitude is zero"
NORMALIZE_NAN = "Cannot normalize a vector when its magnitude is NaN"
NORMALIZE_INF = ("Cannot normalize a vector when its magnitude is infinite "
                 "except under special conditions")

_ROUND_CONTEXT = Context(prec=800)


def almost_equal(a: float, b: float, tolerance: float) -> bool:
    """
    Absolute-tolerance comparison of two floats.

    Exactly equal values (including equal infinities) always match, and two
    NaNs match each other; otherwise |a - b| must not exceed tolerance.
    """
    if a == b or (a != a and b != b):
        return True
    return abs(a - b) <= tolerance


def _sqrt(value: float) -> float:
    if value >= 0:
        return math.sqrt(value)
    return math.nan


def _is_odd_integer(power: float) -> bool:
    return float(power).is_integer() and int(power) % 2 == 1


def _pow(base: float, power: float) -> float:
    try:
        return math.pow(base, power)
    except ValueError:
        if base == 0 and power < 0:
            # pole at zero: -0.0 keeps its sign for odd integer powers
            return math.copysign(math.inf, base) if _is_odd_integer(power) else math.inf
        return math.nan
    except OverflowError:
        if base < 0 and _is_odd_integer(power):
            return -math.inf
        return math.inf


def _cos_sin(rad: float):
    """cos and sin of an angle; NaN for both when the angle is not finite."""
    if not math.isfinite(rad):
        return math.nan, math.nan
    return math.cos(rad), math.sin(rad)


def _round(value: float, digits: int, mode: str) -> float:
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(value).quantize(quantum, rounding=mode, context=_ROUND_CONTEXT))


def _special_case_component(c: float) -> float:
    if c == 0:
        return c  # keeps the sign of -0.0
    if c == math.inf:
        return 1.0
    if c == -math.inf:
        return -1.0
    return math.nan


class Vec3:
    """
    Immutable 3-component vector of doubles.

    Every operation returns a new Vec3.  Two equality notions coexist:

    * ``==`` is exact IEEE-754 component equality, so a vector holding NaN
      never equals anything, itself included.
    * ``almost_equals(other, tolerance)`` compares each component within an
      absolute tolerance and treats NaN as equal to NaN.

    The ordering operators (``<``, ``<=``, ``>``, ``>=``) compare squared
    magnitudes.  They are a length proxy, not a lexicographic ordering, so
    ``a <= b and b <= a`` does not imply ``a == b``.
    """
    __slots__ = ('x', 'y', 'z')

    def __init__(self, x: float, y: float, z: float):
        object.__setattr__(self, 'x', float(x))
        object.__setattr__(self, 'y', float(y))
        object.__setattr__(self, 'z', float(z))

    @classmethod
    def from_iter(cls, values) -> 'Vec3':
        """Build from a sequence holding exactly three numbers."""
        values = list(values)
        if len(values) != 3:
            raise InvalidArgumentError(
                f"{THREE_COMPONENTS}\nThe argument provided has a length of {len(values)}")
        return cls(values[0], values[1], values[2])

    def __setattr__(self, name, value):
        raise AttributeError("Vec3 is immutable")

    def __delattr__(self, name):
        raise AttributeError("Vec3 is immutable")

    def __reduce__(self):
        return (Vec3, (self.x, self.y, self.z))

    def __repr__(self):
        return f"Vec3({self.x!r}, {self.y!r}, {self.z!r})"

    def __str__(self):
        return f"({self.x}, {self.y}, {self.z})"

    def __format__(self, spec: str) -> str:
        """
        ``x``/``y``/``z`` as the first character selects one component and
        formats it with the rest of the spec; any other spec formats all three.
        """
        if not spec:
            return str(self)
        head, rest = spec[0], spec[1:]
        if head in ('x', 'y', 'z'):
            return format(getattr(self, head), rest)
        return f"({format(self.x, spec)}, {format(self.y, spec)}, {format(self.z, spec)})"

    def to_verbose_string(self) -> str:
        kind = "Unit vector" if self.is_unit_vector() else "Positional vector"
        return (f"{kind} composing of ( x={self.x}, y={self.y}, z={self.z} ) "
                f"of magnitude {self.magnitude()}")

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index):
        if index == 0: return self.x
        if index == 1: return self.y
        if index == 2: return self.z
        raise InvalidArgumentError(f"{THREE_COMPONENTS}\nIndex {index!r} is out of range")

    def to_list(self) -> list:
        return [self.x, self.y, self.z]

    # ── Arithmetic ──────────────────────────────────────────────────────

    def __add__(self, other):
        if isinstance(other, Vec3):
            return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vec3):
            return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __mul__(self, scalar):
        if isinstance(scalar, (int, float)):
            return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        if isinstance(scalar, (int, float)):
            return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)
        return NotImplemented

    def __neg__(self):
        return Vec3(-self.x, -self.y, -self.z)

    def __pos__(self):
        return Vec3(+self.x, +self.y, +self.z)

    def __abs__(self):
        return self.magnitude()

    # ── Equality & ordering ─────────────────────────────────────────────

    def __eq__(self, other):
        if isinstance(other, Vec3):
            return self.x == other.x and self.y == other.y and self.z == other.z
        return NotImplemented

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def __lt__(self, other):
        if isinstance(other, Vec3):
            return self.sum_component_squares() < other.sum_component_squares()
        return NotImplemented

    def __le__(self, other):
        if isinstance(other, Vec3):
            return self.sum_component_squares() <= other.sum_component_squares()
        return NotImplemented

    def __gt__(self, other):
        if isinstance(other, Vec3):
            return self.sum_component_squares() > other.sum_component_squares()
        return NotImplemented

    def __ge__(self, other):
        if isinstance(other, Vec3):
            return self.sum_component_squares() >= other.sum_component_squares()
        return NotImplemented

    def almost_equals(self, other, tolerance: float = 0.0) -> bool:
        """Per-component absolute-tolerance equality; NaN matches NaN."""
        if not isinstance(other, Vec3):
            return False
        return (almost_equal(self.x, other.x, tolerance) and
                almost_equal(self.y, other.y, tolerance) and
                almost_equal(self.z, other.z, tolerance))

    def compare_to(self, other, tolerance=None) -> int:
        """
        Magnitude ordering as -1, 0 or 1.

        With a tolerance, vectors that are tolerance-equal, or whose
        magnitudes are both infinite, compare as 0.
        """
        if not isinstance(other, Vec3):
            raise InvalidArgumentError(
                f"{NON_VECTOR_COMPARISON}\n"
                f"The argument provided is a type of {type(other).__name__}")
        if tolerance is not None:
            both_infinite = (math.isinf(self.sum_component_squares()) and
                             math.isinf(other.sum_component_squares()))
            if self.almost_equals(other, tolerance) or both_infinite:
                return 0
            return -1 if self < other else 1
        if self < other:
            return -1
        if self > other:
            return 1
        return 0

    # ── Magnitude & components ──────────────────────────────────────────

    def magnitude(self) -> float:
        if self.is_nan():
            return math.nan
        return math.hypot(self.x, self.y, self.z)

    def sum_components(self) -> float:
        return self.x + self.y + self.z

    def sum_component_squares(self) -> float:
        return self.square_components().sum_components()

    def square_components(self) -> 'Vec3':
        return Vec3(self.x * self.x, self.y * self.y, self.z * self.z)

    def sqrt_components(self) -> 'Vec3':
        """Component square roots; negative components become NaN."""
        return Vec3(_sqrt(self.x), _sqrt(self.y), _sqrt(self.z))

    def pow_components(self, power: float) -> 'Vec3':
        return Vec3(_pow(self.x, power), _pow(self.y, power), _pow(self.z, power))

    def round(self, digits: int = 0, mode: str = ROUND_HALF_EVEN) -> 'Vec3':
        """
        Round each component to ``digits`` decimals.

        ``mode`` is one of the ``decimal`` rounding constants; the default
        rounds half to even (banker's rounding).  Use ``decimal.ROUND_HALF_UP``
        to round halves away from zero.
        """
        return Vec3(_round(self.x, digits, mode),
                    _round(self.y, digits, mode),
                    _round(self.z, digits, mode))

    def scale(self, magnitude: float) -> 'Vec3':
        """Rescale to the given magnitude, keeping direction."""
        if magnitude < 0:
            raise OutOfRangeError(
                f"{NEGATIVE_MAGNITUDE}\nThe argument provided has a value of {magnitude}")
        m = self.magnitude()
        if m == 0:
            raise InvalidArgumentError(ORIGIN_VECTOR_MAGNITUDE)
        factor = magnitude / m
        if math.isinf(factor) and math.isfinite(magnitude):
            # subnormal length: the factor overflows, the per-component ratio does not
            return self._divide_by_magnitude() * magnitude
        return self * factor

    # ── Products ────────────────────────────────────────────────────────

    def dot(self, other) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other) -> 'Vec3':
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def mixed_product(self, other_a, other_b) -> float:
        """Signed volume of the parallelepiped spanned by the three vectors."""
        return self.cross(other_a).dot(other_b)

    # ── Normalization ───────────────────────────────────────────────────

    def normalize_special_cases(self) -> 'Vec3':
        """
        Resolve infinite-magnitude vectors to a sign-only direction.

        When the magnitude is infinite each component maps to: 0 -> 0
        (sign kept), +inf -> 1, -inf -> -1, anything else -> NaN.  Vectors of
        finite or NaN magnitude are returned unchanged.
        """
        if math.isinf(self.magnitude()):
            return Vec3(_special_case_component(self.x),
                        _special_case_component(self.y),
                        _special_case_component(self.z))
        return self

    def _divide_by_magnitude(self) -> 'Vec3':
        m = self.magnitude()
        return Vec3(self.x / m, self.y / m, self.z / m)

    def normalize(self) -> 'Vec3':
        """Unit vector in the same direction, or NormalizeError."""
        v = self
        if math.isinf(v.magnitude()):
            v = v.normalize_special_cases()
            if v.is_nan():
                raise InfiniteMagnitudeError(NORMALIZE_INF)
        if v.magnitude() == 0:
            raise ZeroMagnitudeError(NORMALIZE_0)
        if v.is_nan():
            raise NaNMagnitudeError(NORMALIZE_NAN)
        return v._divide_by_magnitude()

    def normalize_or_default(self) -> 'Vec3':
        """Like normalize(), but ORIGIN for zero and NAN for NaN magnitude."""
        v = self.normalize_special_cases()
        if v.magnitude() == 0:
            return ORIGIN
        if v.is_nan():
            return NAN
        return v._divide_by_magnitude()

    # ── Interpolation, distance, angle ──────────────────────────────────

    def interpolate(self, other, control: float, allow_extrapolation: bool = False) -> 'Vec3':
        if not allow_extrapolation and (control > 1 or control < 0):
            raise OutOfRangeError(
                f"{INTERPOLATION_RANGE}\nThe argument provided has a value of {control}")
        return Vec3(
            self.x * (1 - control) + other.x * control,
            self.y * (1 - control) + other.y * control,
            self.z * (1 - control) + other.z * control)

    def distance(self, other) -> float:
        return (self - other).magnitude()

    def angle(self, other) -> float:
        """
        Angle between two vectors in radians.

        Equal vectors give 0 even with infinite components; NaN components
        give NaN.
        """
        if self == other:
            return 0.0
        d = self.normalize_or_default().dot(other.normalize_or_default())
        if d > 1.0:
            d = 1.0
        elif d < -1.0:
            d = -1.0
        return math.acos(d)

    def max(self, other) -> 'Vec3':
        """The longer of the two vectors (self wins ties)."""
        return self if self >= other else other

    def min(self, other) -> 'Vec3':
        """The shorter of the two vectors (self wins ties)."""
        return self if self <= other else other

    # ── Rotation ────────────────────────────────────────────────────────
    # Right-handed, angles in radians.  Yaw turns about Y, pitch about X and
    # roll about Z.

    def rotate_x(self, rad: float, y_off: float = 0.0, z_off: float = 0.0) -> 'Vec3':
        """Rotate about the X axis, optionally around the pivot (y_off, z_off)."""
        c, s = _cos_sin(rad)
        return Vec3(
            self.x,
            self.y * c - self.z * s + (y_off * (1 - c) + z_off * s),
            self.y * s + self.z * c + (z_off * (1 - c) - y_off * s))

    def rotate_y(self, rad: float, x_off: float = 0.0, z_off: float = 0.0) -> 'Vec3':
        """Rotate about the Y axis, optionally around the pivot (x_off, z_off)."""
        c, s = _cos_sin(rad)
        return Vec3(
            self.z * s + self.x * c + (x_off * (1 - c) - z_off * s),
            self.y,
            self.z * c - self.x * s + (z_off * (1 - c) + x_off * s))

    def rotate_z(self, rad: float, x_off: float = 0.0, y_off: float = 0.0) -> 'Vec3':
        """Rotate about the Z axis, optionally around the pivot (x_off, y_off)."""
        c, s = _cos_sin(rad)
        return Vec3(
            self.x * c - self.y * s + (x_off * (1 - c) + y_off * s),
            self.x * s + self.y * c + (y_off * (1 - c) - x_off * s),
            self.z)

    def yaw(self, rad: float) -> 'Vec3':
        return self.rotate_y(rad)

    def pitch(self, rad: float) -> 'Vec3':
        return self.rotate_x(rad)

    def roll(self, rad: float) -> 'Vec3':
        return self.rotate_z(rad)

    # ── Projection, rejection, reflection ───────────────────────────────

    def projection(self, direction) -> 'Vec3':
        """Vector resolute of self along ``direction``; NAN for a zero direction."""
        m = direction.magnitude()
        if m == 0:
            return NAN
        return direction * (self.dot(direction) / m ** 2)

    def rejection(self, direction) -> 'Vec3':
        return self - self.projection(direction)

    def reflection(self, reflector) -> 'Vec3':
        """
        Mirror self about ``reflector``, keeping self's magnitude.

        A vector at a right angle to the reflector comes back negated.
        """
        if abs(abs(self.angle(reflector)) - math.pi / 2) < sys.float_info.epsilon:
            return -self
        return (2 * self.projection(reflector) - self).scale(self.magnitude())

    # ── Decisions ───────────────────────────────────────────────────────

    def is_unit_vector(self, tolerance=None) -> bool:
        if tolerance is None:
            return self.magnitude() == 1
        return almost_equal(self.magnitude(), 1.0, tolerance)

    def is_perpendicular(self, other, tolerance=None) -> bool:
        """
        True when the dot product is zero (within ``tolerance`` if given).

        The zero vector is perpendicular to nothing.
        """
        a = self.normalize_special_cases()
        b = other.normalize_special_cases()
        if a == ZERO or b == ZERO:
            return False
        if tolerance is None:
            return a.dot(b) == 0
        return almost_equal(a.dot(b), 0.0, tolerance)

    def is_back_face(self, line_of_sight) -> bool:
        """Treating self as a face normal, is the face turned away?"""
        return self.dot(line_of_sight) < 0

    def is_nan(self) -> bool:
        return math.isnan(self.x) or math.isnan(self.y) or math.isnan(self.z)


ORIGIN = Vec3(0.0, 0.0, 0.0)
ZERO = ORIGIN
X_AXIS = Vec3(1.0, 0.0, 0.0)
Y_AXIS = Vec3(0.0, 1.0, 0.0)
Z_AXIS = Vec3(0.0, 0.0, 1.0)
NAN = Vec3(math.nan, math.nan, math.nan)
MIN_VALUE = Vec3(-sys.float_info.max, -sys.float_info.max, -sys.float_info.max)
MAX_VALUE = Vec3(sys.float_info.max, sys.float_info.max, sys.float_info.max)
EPSILON = Vec3(5e-324, 5e-324, 5e-324)
