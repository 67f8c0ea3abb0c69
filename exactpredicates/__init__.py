"""
Exact orientation and incircle predicates for points in the plane.

    from exactpredicates import orient, incircle, acuteangle
    orient( (0,0), (1,0), (0,1) )  # -> 1

Double precision inputs go through a semi-static floating point filter,
and fall back to exact rational arithmetic when the filter cannot decide.
"""
import logging

from .robust_predicates import orient, incircle, acuteangle
from .generic import orient_generic, incircle_generic
from .batch import orient_many, incircle_many
from .points import (exact, exact_point, as_xy,
                     PredicateError, NonFiniteCoordinate, BadPoint)
from .counter import CallCounter, reset_generic_call_counter, generic_call_count
from .utils import signof, det2, det_point, dot

logging.getLogger(__name__).addHandler(logging.NullHandler())
