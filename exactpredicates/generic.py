"""
Orientation and incircle tests written once, over any numeric type.

Fed Fractions (or ints) these are exact, and serve as the ground truth
for the filtered floating point predicates in robust_predicates.  The
coordinates are used as given, so symbolic or other exact types also
work, as long as they support +, -, * and comparison with 0.
"""
from .utils import signof, det_point, abs2, sub
from .points import as_xy
from . import counter as _counter


def orient_generic(p,q,r,counter=None):
    """
    Sign of cross(q-p,r-p): 1 if r is left of the line p->q, -1 if right,
    0 if the three points are collinear or p==q.
    """
    _counter.resolve(counter).increment()
    p,q,r=as_xy(p),as_xy(q),as_xy(r)
    return signof( det_point(sub(q,p),sub(r,p)) )

def incircle_generic(a,b,c,p,counter=None):
    """
    For a,b,c counterclockwise, 1 if p is strictly inside their
    circumcircle, -1 if outside, 0 if on it.  Clockwise a,b,c reverse
    the sign.
    """
    _counter.resolve(counter).increment()
    p=as_xy(p)
    a=sub(as_xy(a),p)
    b=sub(as_xy(b),p)
    c=sub(as_xy(c),p)
    d=( abs2(a)*det_point(b,c)
        + abs2(b)*det_point(c,a)
        + abs2(c)*det_point(a,b) )
    return signof(d)
