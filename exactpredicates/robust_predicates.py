# Robust orientation and incircle predicates for points in the plane.
#
# Each predicate first evaluates its determinant in double precision and
# compares it against a semi-static error bound, following the static
# filters of CGAL (Orientation_2 and Side_of_oriented_circle_2).  When the
# bound cannot certify the sign, the points are lifted to exact rationals
# and the formula is evaluated again by the generic evaluator.
#
# Results are exact for any finite double precision input.  NaN or
# infinite coordinates raise NonFiniteCoordinate.

import logging

from .utils import det2, sub, rot90
from .points import as_xy, as_float_points, check_finite, exact_point
from .generic import orient_generic, incircle_generic

log=logging.getLogger(__name__)

## Filter constants
# below this, eps itself could underflow: sqrt(min_double/eps)
ORIENT_UNDERFLOW=1e-146
# above this, the determinant could overflow: sqrt(max_double [hadamard]/2)
ORIENT_OVERFLOW=1e153
ORIENT_ERRBOUND=8.8872057372592798e-16

INCIRCLE_UNDERFLOW=1e-73
# sqrt(sqrt(max_double/16 [hadamard]))
INCIRCLE_OVERFLOW=1e76
INCIRCLE_ERRBOUND=8.8878565762001373e-15


def Two_Diff(a,b):
    """
    x=a-b rounded, and y the roundoff, so that a-b == x+y exactly.
    y is nonzero (or NaN, on overflow) iff the subtraction was inexact.
    """
    x = a - b
    bvirt = a - x
    avirt = x + bvirt
    bround = bvirt - b
    around = a - avirt
    y = around + bround
    return x,y


def certify_orient(p,q,r):
    """
    Fast path of orient() for finite (x,y) float pairs.
    Returns the sign when the floating point result can be trusted, or
    None when the exact evaluation is needed.
    """
    pqx,pqy=q[0]-p[0],q[1]-p[1]
    prx,pry=r[0]-p[0],r[1]-p[1]
    d=pqx*pry - prx*pqy

    maxx=max(abs(pqx),abs(prx))
    maxy=max(abs(pqy),abs(pry))
    if maxx>maxy:
        maxx,maxy=maxy,maxx

    if maxx<ORIENT_UNDERFLOW:
        # eps would underflow.  maxx==0 means all three points share
        # an x (or y) coordinate
        if maxx==0:
            return 0
    elif maxy<ORIENT_OVERFLOW:
        eps=ORIENT_ERRBOUND*maxx*maxy
        if d>eps:
            return 1
        elif d<-eps:
            return -1
    return None

def certify_incircle(p,q,r,t):
    """
    Fast path of incircle() for finite (x,y) float pairs, returning the
    sign or None, as for certify_orient.
    """
    qpx,qpy=q[0]-p[0],q[1]-p[1]
    rpx,rpy=r[0]-p[0],r[1]-p[1]
    tpx,tpy=t[0]-p[0],t[1]-p[1]
    tqx,tqy=t[0]-q[0],t[1]-q[1]
    rqx,rqy=r[0]-q[0],r[1]-q[1]

    d=det2(qpx*tpy - qpy*tpx, tpx*tqx + tpy*tqy,
           qpx*rpy - qpy*rpx, rpx*rqx + rpy*rqy)

    maxx=max(abs(qpx),abs(rpx),abs(tpx),abs(tqx),abs(rqx))
    maxy=max(abs(qpy),abs(rpy),abs(tpy),abs(tqy),abs(rqy))
    if maxx>maxy:
        maxx,maxy=maxy,maxx

    if maxx<INCIRCLE_UNDERFLOW:
        # all four points on a vertical or horizontal line
        if maxx==0:
            return 0
    elif maxy<INCIRCLE_OVERFLOW:
        eps=INCIRCLE_ERRBOUND*maxx*maxy*(maxy*maxy)
        if d>eps:
            return 1
        elif d<-eps:
            return -1
    return None


def _float_or_exact(pnts):
    """
    Returns (float_pnts,None) when every coordinate of pnts is a double,
    otherwise (None,exact_pnts).
    """
    pnts=[as_xy(p) for p in pnts]
    check_finite(*pnts)
    fpnts=as_float_points(pnts)
    if fpnts is None:
        return None,[exact_point(p) for p in pnts]
    return fpnts,None

def orient(p,q,r,counter=None):
    """
    Return 1 if r is on the left of the oriented line from p to q, -1 if
    it is on the right, 0 if r is on the line or if p==q.

    p,q,r: complex numbers, (x,y) pairs or objects with x,y attributes.
    counter: optional CallCounter to count exact evaluations into.
    """
    fpnts,xpnts=_float_or_exact( (p,q,r) )
    if fpnts is not None:
        s=certify_orient(*fpnts)
        if s is not None:
            return s
        log.debug("orient: filter failed for %s, evaluating exactly",fpnts)
        xpnts=[exact_point(pnt) for pnt in fpnts]
    return orient_generic(*xpnts,counter=counter)

def incircle(a,b,c,p,counter=None):
    """
    Assuming a,b,c define a counterclockwise triangle, return 1 if p is
    strictly inside its circumcircle, -1 if outside and 0 if on the circle.

    If the triangle is clockwise, the signs are reversed.  If a,b,c are
    collinear this degenerates to an orientation test.  If two of the four
    arguments are equal, the result is 0.
    """
    fpnts,xpnts=_float_or_exact( (a,b,c,p) )
    if fpnts is not None:
        s=certify_incircle(*fpnts)
        if s is not None:
            return s
        log.debug("incircle: filter failed for %s, evaluating exactly",fpnts)
        xpnts=[exact_point(pnt) for pnt in fpnts]
    return incircle_generic(*xpnts,counter=counter)

def acuteangle(p,q,r,counter=None):
    """
    Sign of the dot product of q-p and r-p: 1 if the angle at p is acute,
    0 if it is right (or q or r coincides with p), -1 if obtuse.
    """
    fpnts,xpnts=_float_or_exact( (p,q,r) )
    if fpnts is not None:
        p,q,r=fpnts
        pqx,pqx_err=Two_Diff(q[0],p[0])
        pqy,pqy_err=Two_Diff(q[1],p[1])
        prx,prx_err=Two_Diff(r[0],p[0])
        pry,pry_err=Two_Diff(r[1],p[1])
        if pqx_err==0 and pqy_err==0 and prx_err==0 and pry_err==0:
            return orient( (0.0,0.0), (pqx,pqy), rot90( (prx,pry) ),
                           counter=counter)
        log.debug("acuteangle: inexact differences for %s, evaluating exactly",fpnts)
        xpnts=[exact_point(pnt) for pnt in fpnts]
    p,q,r=xpnts
    return orient_generic( (0,0), sub(q,p), rot90(sub(r,p)), counter=counter)
