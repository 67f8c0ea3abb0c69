"""
Reading point-like values as (x,y) pairs, and lifting double precision
coordinates to exact rationals.

A point may be given as a complex number, an object with x and y
attributes (shapely Points, for instance), or any length-2 sequence or
array.
"""
import math
import numbers
from fractions import Fraction
from decimal import Decimal

import numpy as np


class PredicateError(ValueError):
    pass

class NonFiniteCoordinate(PredicateError):
    """ A NaN or infinite coordinate was passed to a predicate """
    pass

class BadPoint(PredicateError):
    pass


def scalar(c):
    # numpy scalars compare against python ints in floating point, which
    # would defeat the faithfulness test below.
    if isinstance(c,np.generic):
        return c.item()
    return c

def as_xy(p):
    """
    Return the coordinates of p as a tuple (x,y), without changing their
    numeric type beyond unwrapping numpy scalars.
    """
    if isinstance(p,numbers.Complex) and not isinstance(p,numbers.Real):
        return (scalar(p.real),scalar(p.imag))
    if hasattr(p,'x') and hasattr(p,'y'):
        return (scalar(p.x),scalar(p.y))
    try:
        x,y=p
    except (TypeError,ValueError):
        raise BadPoint("Cannot read %r as a plane point"%(p,))
    return (scalar(x),scalar(y))

def is_finite(c):
    """
    False for NaN or infinite values of any real type.  Reals too large
    for a double (big ints, Fractions) are finite.
    """
    if isinstance(c,numbers.Rational):
        return True
    if isinstance(c,float):
        return math.isfinite(c)
    if isinstance(c,np.generic):
        return bool(np.isfinite(c))
    if isinstance(c,Decimal):
        return c.is_finite()
    if isinstance(c,numbers.Real):
        try:
            return math.isfinite(c)
        except OverflowError:
            return True
    return True

def check_finite(*pnts):
    """
    Raise NonFiniteCoordinate if any coordinate of the given (x,y) pairs
    is NaN or infinite.
    """
    for pnt in pnts:
        for c in pnt:
            if not is_finite(c):
                raise NonFiniteCoordinate("Predicates require finite coordinates, got %r"%(pnt,))

def faithful_float(c):
    """
    c as a float if that conversion is exact, otherwise None.
    """
    if isinstance(c,float):
        return c
    if not isinstance(c,numbers.Real) or isinstance(c,bool):
        return None
    try:
        f=float(c)
    except (OverflowError,TypeError,ValueError):
        return None
    # int/Fraction/float comparisons in python are exact
    if math.isfinite(f) and f==c:
        return f
    return None

def as_float_points(pnts):
    """
    pnts: sequence of (x,y) pairs.
    Returns a list of (x,y) float pairs when every coordinate is exactly
    representable in double precision, or None when some coordinate is not.
    """
    result=[]
    for x,y in pnts:
        fx=faithful_float(x)
        fy=faithful_float(y)
        if fx is None or fy is None:
            return None
        result.append( (fx,fy) )
    return result

def exact(c):
    """
    Lift a single coordinate to an exact rational.  Binary floats (python,
    numpy extended precision) and Decimals map to the Fraction they
    represent exactly, other values pass through.
    """
    c=scalar(c)
    if not is_finite(c):
        raise NonFiniteCoordinate("Cannot lift %r to an exact rational"%(c,))
    if isinstance(c,(float,Decimal)):
        return Fraction(c)
    if isinstance(c,np.floating):
        return Fraction(*c.as_integer_ratio())
    return c

def exact_point(p):
    """ (x,y) pair of exact rationals for the point-like p """
    x,y=as_xy(p)
    return (exact(x),exact(y))
