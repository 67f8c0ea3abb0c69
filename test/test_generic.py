from fractions import Fraction

from exactpredicates import counter
from exactpredicates.generic import orient_generic, incircle_generic

def test_orient_generic_fractions():
    assert orient_generic( (0,0), (1,0), (0,1) )==1
    assert orient_generic( (0,0), (1,0), (0,-1) )==-1
    assert orient_generic( (0,0), (1,0), (2,0) )==0

    third=Fraction(1,3)
    # exactly on the line y=x/3
    assert orient_generic( (0,0), (3,1), (1,third) )==0
    assert orient_generic( (0,0), (3,1), (1,third+Fraction(1,10**30)) )==1

def test_orient_generic_big_ints():
    big=2**80
    assert orient_generic( (big,big), (big+1,big+1), (big+2,big+2) )==0
    assert orient_generic( (big,big), (big+1,big+1), (big+2,big+3) )==1

def test_incircle_generic():
    a,b,c=(0,0),(1,0),(0,1)
    assert incircle_generic(a,b,c,(Fraction(1,10),Fraction(1,10)))==1
    assert incircle_generic(a,b,c,(10,10))==-1
    # (1,1) is on the circumcircle of the unit right triangle
    assert incircle_generic(a,b,c,(1,1))==0
    # clockwise triangle reverses the sign
    assert incircle_generic(a,c,b,(Fraction(1,10),Fraction(1,10)))==-1

def test_generic_counts_calls():
    counter.reset_generic_call_counter()
    orient_generic( (0,0), (1,0), (0,1) )
    incircle_generic( (0,0), (1,0), (0,1), (2,2) )
    assert counter.generic_call_count()==2
    counter.reset_generic_call_counter()
    assert counter.generic_call_count()==0

def test_generic_private_counter():
    mine=counter.CallCounter()
    counter.reset_generic_call_counter()
    orient_generic( (0,0), (1,0), (0,1), counter=mine )
    orient_generic( (0,0), (1,0), (0,1), counter=mine )
    assert mine.value==2
    assert counter.generic_call_count()==0
