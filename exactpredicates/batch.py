"""
Vectorized versions of orient() and incircle() for many points at once.

The floating point filter runs over whole arrays.  Only the rows it cannot
certify, or which hold coordinates that are not doubles (Fractions, big
ints), are lifted to exact rationals and evaluated one at a time.  The
result is identical, row by row, to calling the scalar predicates.
"""
import logging

import numpy as np

from .points import (BadPoint, NonFiniteCoordinate, exact_point, scalar,
                     is_finite, faithful_float)
from .generic import orient_generic, incircle_generic
from . import robust_predicates as rp

log=logging.getLogger(__name__)


def _xy_array(pnts):
    """
    Read point coordinates with a trailing dimension of 2.
    Returns float64 coordinates, the original coordinates, and a boolean
    array marking which coordinates the float64 copy holds exactly.
    Coordinates which are not exact in float64 are 0.0 in the float copy.
    """
    pnts=np.asarray(pnts)
    if np.iscomplexobj(pnts):
        pnts=np.stack( [pnts.real,pnts.imag], axis=-1)
    if pnts.ndim==0 or pnts.shape[-1]!=2:
        raise BadPoint("Expected point coordinates in a trailing dimension of 2, got shape %s"%(pnts.shape,))

    if pnts.dtype.kind=='f' and pnts.dtype.itemsize<=8:
        fpnts=pnts.astype(np.float64)
        return fpnts,fpnts,np.ones(fpnts.shape,bool)
    if pnts.dtype.kind in 'iu':
        # ints below 2**53 in magnitude are doubles; larger ones go exact
        fpnts=pnts.astype(np.float64)
        faithful=np.abs(fpnts)<2.0**53
        fpnts[~faithful]=0.0
        return fpnts,pnts.astype(object),faithful

    # object arrays (Fractions, big ints), extended precision, etc.
    orig=pnts.astype(object)
    fpnts=np.zeros(orig.shape,np.float64)
    faithful=np.zeros(orig.shape,bool)
    for idx,c in np.ndenumerate(orig):
        c=scalar(c)
        if not is_finite(c):
            raise NonFiniteCoordinate("Predicates require finite coordinates, got %r"%(c,))
        f=faithful_float(c)
        if f is not None:
            fpnts[idx]=f
            faithful[idx]=True
    return fpnts,orig,faithful

def _prepare(*pnts):
    """
    Broadcast the point arrays against each other, and flatten to [N,2].
    Returns the leading shape, the flattened float64 arrays, the flattened
    original coordinates, and a mask of rows which must be evaluated
    exactly because some coordinate is not a double.
    """
    arrays=[]
    for p in pnts:
        arrays.extend(_xy_array(p))
    arrays=np.broadcast_arrays(*arrays)
    shape=arrays[0].shape[:-1]
    flat=[a.reshape([-1,2]) for a in arrays]
    fpnts=flat[0::3]
    orig=flat[1::3]
    for p in fpnts:
        if not np.all(np.isfinite(p)):
            raise NonFiniteCoordinate("Predicates require finite coordinates")
    inexact=np.zeros(len(fpnts[0]),bool)
    for faithful in flat[2::3]:
        inexact|=~np.all(faithful,axis=1)
    return shape,fpnts,orig,inexact

def _filter(d,maxx,maxy,eps,underflow,overflow):
    """
    Apply the semi-static filter to arrays of determinants and bounds.
    Returns the signs and a mask of rows where the sign is certain.
    """
    signs=np.zeros(d.shape,np.int8)
    usable=(maxx>=underflow) & (maxy<overflow)
    pos=usable & (d>eps)
    neg=usable & (d<-eps)
    signs[pos]=1
    signs[neg]=-1
    return signs, pos|neg|(maxx==0)

def _sorted_max(xs,ys):
    maxx=np.max(np.abs(xs),axis=0)
    maxy=np.max(np.abs(ys),axis=0)
    return np.minimum(maxx,maxy),np.maximum(maxx,maxy)

def orient_many(p,q,r,counter=None):
    """
    p,q,r: arrays of points [...,2], or complex arrays, broadcast against
    each other.
    Returns an int8 array of orient(p[i],q[i],r[i]).
    """
    shape,(p,q,r),(xp,xq,xr),inexact=_prepare(p,q,r)

    # overflow and underflow land in rows which the filter rejects
    with np.errstate(over='ignore',under='ignore',invalid='ignore'):
        pq=q-p
        pr=r-p
        d=pq[:,0]*pr[:,1] - pr[:,0]*pq[:,1]
        maxx,maxy=_sorted_max( [pq[:,0],pr[:,0]], [pq[:,1],pr[:,1]] )
        eps=rp.ORIENT_ERRBOUND*maxx*maxy

    signs,certain=_filter(d,maxx,maxy,eps,rp.ORIENT_UNDERFLOW,rp.ORIENT_OVERFLOW)
    certain&=~inexact

    uncertain=np.nonzero(~certain)[0]
    if len(uncertain):
        log.debug("orient_many: %d of %d rows evaluated exactly",len(uncertain),len(d))
    for i in uncertain:
        signs[i]=orient_generic(exact_point(xp[i]),exact_point(xq[i]),exact_point(xr[i]),
                                counter=counter)
    return signs.reshape(shape)

def incircle_many(a,b,c,p,counter=None):
    """
    a,b,c,p: arrays of points [...,2], or complex arrays, broadcast
    against each other.
    Returns an int8 array of incircle(a[i],b[i],c[i],p[i]).
    """
    shape,(a,b,c,t),(xa,xb,xc,xt),inexact=_prepare(a,b,c,p)

    with np.errstate(over='ignore',under='ignore',invalid='ignore'):
        qp=b-a
        rp_=c-a
        tp=t-a
        tq=t-b
        rq=c-b
        d=( (qp[:,0]*tp[:,1] - qp[:,1]*tp[:,0]) * (rp_[:,0]*rq[:,0] + rp_[:,1]*rq[:,1])
            - (tp[:,0]*tq[:,0] + tp[:,1]*tq[:,1]) * (qp[:,0]*rp_[:,1] - qp[:,1]*rp_[:,0]) )
        diffs=[qp,rp_,tp,tq,rq]
        maxx,maxy=_sorted_max( [v[:,0] for v in diffs], [v[:,1] for v in diffs] )
        eps=rp.INCIRCLE_ERRBOUND*maxx*maxy*(maxy*maxy)

    signs,certain=_filter(d,maxx,maxy,eps,rp.INCIRCLE_UNDERFLOW,rp.INCIRCLE_OVERFLOW)
    certain&=~inexact

    uncertain=np.nonzero(~certain)[0]
    if len(uncertain):
        log.debug("incircle_many: %d of %d rows evaluated exactly",len(uncertain),len(d))
    for i in uncertain:
        signs[i]=incircle_generic(exact_point(xa[i]),exact_point(xb[i]),
                                  exact_point(xc[i]),exact_point(xt[i]),
                                  counter=counter)
    return signs.reshape(shape)
