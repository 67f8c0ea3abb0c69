"""
Small scalar helpers shared by the predicates.

These are written against plain arithmetic operators so that the same
code evaluates over floats, Fractions, ints or any other ordered field.
"""

def signof(x):
    """
    1 if x>0, -1 if x<0, and 0 otherwise.
    """
    if x > 0:
        return 1
    elif x < 0:
        return -1
    else:
        return 0

def det2(a,b,c,d):
    """ determinant of [[a,b],[c,d]] """
    return a*d - b*c

def det_point(u,v):
    """
    cross product of two plane vectors, u.x*v.y - u.y*v.x.
    u,v: (x,y) pairs.
    Equal to the imaginary part of conj(u)*v, the signed area of the
    parallelogram spanned by u and v.
    """
    return u[0]*v[1] - u[1]*v[0]

def dot(u,v):
    return u[0]*v[0] + u[1]*v[1]

def abs2(u):
    # squared magnitude, |u|^2
    return u[0]*u[0] + u[1]*u[1]

def sub(u,v):
    return (u[0]-v[0], u[1]-v[1])

def rot90(u):
    # CCW rotation, (x,y) -> (-y,x)
    return (-u[1], u[0])
