"""
Rule bodies of the 3x magnification table.

Each entry pairs the pattern codes sharing a body with the body's steps.
A step assigns one sub-pixel of the 3x3 output block:

    "RC=i"              copy window color i
    "RC=i,j@a:b"        blend colors i, j with weights a:b
    "RC=i,j,k@a:b:c"    blend three colors
    "?a,b STEPS | STEPS" first STEPS if colors a and b differ, else the second

R and C are the sub-pixel row and column, window indices run 0-8 in
row-major order with 4 at the center.
"""

HQ3X_BODIES = (
    ((0, 1, 4, 32, 128, 5, 132, 160, 33, 129, 36, 133,
      164, 161, 37, 165), (
        "00=4,3,1@2:1:1",
        "01=4,1@3:1",
        "02=4,1,5@2:1:1",
        "10=4,3@3:1",
        "11=4",
        "12=4,5@3:1",
        "20=4,7,3@2:1:1",
        "21=4,7@3:1",
        "22=4,5,7@2:1:1",
    )),
    ((2, 34, 130, 162), (
        "00=4,0@3:1",
        "01=4",
        "02=4,2@3:1",
        "10=4,3@3:1",
        "11=4",
        "12=4,5@3:1",
        "20=4,7,3@2:1:1",
        "21=4,7@3:1",
        "22=4,5,7@2:1:1",
    )),
    ((16, 17, 48, 49), (
        "00=4,3,1@2:1:1",
        "01=4,1@3:1",
        "02=4,2@3:1",
        "10=4,3@3:1",
        "11=4",
        "12=4",
        "20=4,7,3@2:1:1",
        "21=4,7@3:1",
        "22=4,8@3:1",
    )),
    ((64, 65, 68, 69), (
        "00=4,3,1@2:1:1",
        "01=4,1@3:1",
        "02=4,1,5@2:1:1",
        "10=4,3@3:1",
        "11=4",
        "12=4,5@3:1",
        "20=4,6@3:1",
        "21=4",
        "22=4,8@3:1",
    )),
    ((8, 12, 136, 140), (
        "00=4,0@3:1",
        "01=4,1@3:1",
        "02=4,1,5@2:1:1",
        "10=4",
        "11=4",
        "12=4,5@3:1",
        "20=4,6@3:1",
        "21=4,7@3:1",
        "22=4,5,7@2:1:1",
    )),
    ((3, 35, 131, 163), (
        "00=4,3@3:1",
        "01=4",
        "02=4,2@3:1",
        "10=4,3@3:1",
        "11=4",
        "12=4,5@3:1",
        "20=4,7,3@2:1:1",
        "21=4,7@3:1",
        "22=4,5,7@2:1:1",
    )),
    ((6, 38, 134, 166), (
        "00=4,0@3:1",
        "01=4",
        "02=4,5@3:1",
        "10=4,3@3:1",
        "11=4",
        "12=4,5@3:1",
        "20=4,7,3@2:1:1",
        "21=4,7@3:1",
        "22=4,5,7@2:1:1",
    )),
    ((20, 21, 52, 53), (
        "00=4,3,1@2:1:1",
        "01=4,1@3:1",
        "02=4,1@3:1",
        "10=4,3@3:1",
        "11=4",
        "12=4",
        "20=4,7,3@2:1:1",
        "21=4,7@3:1",
        "22=4,8@3:1",
    )),
    ((144, 145, 176, 177), (
        "00=4,3,1@2:1:1",
        "01=4,1@3:1",
        "02=4,2@3:1",
        "10=4,3@3:1",
        "11=4",
        "12=4",
        "20=4,7,3@2:1:1",
        "21=4,7@3:1",
        "22=4,7@3:1",
    )),
    ((192, 193, 196, 197), (
        "00=4,3,1@2:1:1",
        "01=4,1@3:1",
        "02=4,1,5@2:1:1",
        "10=4,3@3:1",
        "11=4",
        "12=4,5@3:1",
        "20=4,6@3:1",
        "21=4",
        "22=4,5@3:1",
    )),
    ((96, 97, 100, 101), (
        "00=4,3,1@2:1:1",
        "01=4,1@3:1",
        "02=4,1,5@2:1:1",
        "10=4,3@3:1",
        "11=4",
        "12=4,5@3:1",
        "20=4,3@3:1",
        "21=4",
        "22=4,8@3:1",
    )),
    ((40, 44, 168, 172), (
        "00=4,0@3:1",
        "01=4,1@3:1",
        "02=4,1,5@2:1:1",
        "10=4",
        "11=4",
        "12=4,5@3:1",
        "20=4,7@3:1",
        "21=4,7@3:1",
        "22=4,5,7@2:1:1",
    )),
    ((9, 13, 137, 141), (
        "00=4,1@3:1",
        "01=4,1@3:1",
        "02=4,1,5@2:1:1",
        "10=4",
        "11=4",
        "12=4,5@3:1",
        "20=4,6@3:1",
        "21=4,7@3:1",
        "22=4,5,7@2:1:1",
    )),
    ((18, 50), (
        "00=4,0@3:1",
        "?1,5 01=4 02=4,2@3:1 12=4 | 01=4,1@7:1 02=4,1,5@2:7:7 12=4,5@7:1",
        "10=4,3@3:1",
        "11=4",
        "20=4,7,3@2:1:1",
        "21=4,7@3:1",
        "22=4,8@3:1",
    )),
    ((80, 81), (
        "00=4,3,1@2:1:1",
        "01=4,1@3:1",
        "02=4,2@3:1",
        "10=4,3@3:1",
        "11=4",
        "20=4,6@3:1",
        "?5,7 12=4 21=4 22=4,8@3:1 | 12=4,5@7:1 21=4,7@7:1 22=4,5,7@2:7:7",
    )),
    ((72, 76), (
        "00=4,0@3:1",
        "01=4,1@3:1",
        "02=4,1,5@2:1:1",
        "11=4",
        "12=4,5@3:1",
        "?7,3 10=4 20=4,6@3:1 21=4 | 10=4,3@7:1 20=4,7,3@2:7:7 21=4,7@7:1",
        "22=4,8@3:1",
    )),
    ((10, 138), (
        "?3,1 00=4,0@3:1 01=4 10=4 | 00=4,3,1@2:7:7 01=4,1@7:1 10=4,3@7:1",
        "02=4,2@3:1",
        "11=4",
        "12=4,5@3:1",
        "20=4,6@3:1",
        "21=4,7@3:1",
        "22=4,5,7@2:1:1",
    )),
    ((66,), (
        "00=4,0@3:1",
        "01=4",
        "02=4,2@3:1",
        "10=4,3@3:1",
        "11=4",
        "12=4,5@3:1",
        "20=4,6@3:1",
        "21=4",
        "22=4,8@3:1",
    )),
    ((24,), (
        "00=4,0@3:1",
        "01=4,1@3:1",
        "02=4,2@3:1",
        "10=4",
        "11=4",
        "12=4",
        "20=4,6@3:1",
        "21=4,7@3:1",
        "22=4,8@3:1",
    )),
    ((7, 39, 135), (
        "00=4,3@3:1",
        "01=4",
        "02=4,5@3:1",
        "10=4,3@3:1",
        "11=4",
        "12=4,5@3:1",
        "20=4,7,3@2:1:1",
        "21=4,7@3:1",
        "22=4,5,7@2:1:1",
    )),
    ((148, 149, 180), (
        "00=4,3,1@2:1:1",
        "01=4,1@3:1",
        "02=4,1@3:1",
        "10=4,3@3:1",
        "11=4",
        "12=4",
        "20=4,7,3@2:1:1",
        "21=4,7@3:1",
        "22=4,7@3:1",
    )),
    ((224, 228, 225), (
        "00=4,3,1@2:1:1",
        "01=4,1@3:1",
        "02=4,1,5@2:1:1",
        "10=4,3@3:1",
        "11=4",
        "12=4,5@3:1",
        "20=4,3@3:1",
        "21=4",
        "22=4,5@3:1",
    )),
    ((41, 169, 45), (
        "00=4,1@3:1",
        "01=4,1@3:1",
        "02=4,1,5@2:1:1",
        "10=4",
        "11=4",
        "12=4,5@3:1",
        "20=4,7@3:1",
        "21=4,7@3:1",
        "22=4,5,7@2:1:1",
    )),
    ((22, 54), (
        "00=4,0@3:1",
        "?1,5 01=4 02=4 12=4 | 01=4,1@7:1 02=4,1,5@2:7:7 12=4,5@7:1",
        "10=4,3@3:1",
        "11=4",
        "20=4,7,3@2:1:1",
        "21=4,7@3:1",
        "22=4,8@3:1",
    )),
    ((208, 209), (
        "00=4,3,1@2:1:1",
        "01=4,1@3:1",
        "02=4,2@3:1",
        "10=4,3@3:1",
        "11=4",
        "20=4,6@3:1",
        "?5,7 12=4 21=4 22=4 | 12=4,5@7:1 21=4,7@7:1 22=4,5,7@2:7:7",
    )),
    ((104, 108), (
        "00=4,0@3:1",
        "01=4,1@3:1",
        "02=4,1,5@2:1:1",
        "11=4",
        "12=4,5@3:1",
        "?7,3 10=4 20=4 21=4 | 10=4,3@7:1 20=4,7,3@2:7:7 21=4,7@7:1",
        "22=4,8@3:1",
    )),
    ((11, 139), (
        "?3,1 00=4 01=4 10=4 | 00=4,3,1@2:7:7 01=4,1@7:1 10=4,3@7:1",
        "02=4,2@3:1",
        "11=4",
        "12=4,5@3:1",
        "20=4,6@3:1",
        "21=4,7@3:1",
        "22=4,5,7@2:1:1",
    )),
    ((19, 51), (
        "?1,5 00=4,3@3:1 01=4 02=4,2@3:1 12=4 | 00=4,3,1@2:1:1 01=1,4@3:1 02=1,5@1:1 12=4,5@3:1",
        "10=4,3@3:1",
        "11=4",
        "20=4,7,3@2:1:1",
        "21=4,7@3:1",
        "22=4,8@3:1",
    )),
    ((146, 178), (
        "?1,5 01=4 02=4,2@3:1 12=4 22=4,7@3:1 | 01=4,1@3:1 02=1,5@1:1 12=5,4@3:1 22=4,5,7@2:1:1",
        "00=4,0@3:1",
        "10=4,3@3:1",
        "11=4",
        "20=4,7,3@2:1:1",
        "21=4,7@3:1",
    )),
    ((84, 85), (
        "?5,7 02=4,1@3:1 12=4 21=4 22=4,8@3:1 | 02=4,1,5@2:1:1 12=5,4@3:1 21=4,7@3:1 22=5,7@1:1",
        "00=4,3,1@2:1:1",
        "01=4,1@3:1",
        "10=4,3@3:1",
        "11=4",
        "20=4,6@3:1",
    )),
    ((112, 113), (
        "?5,7 12=4 20=4,3@3:1 21=4 22=4,8@3:1 | 12=4,5@3:1 20=4,7,3@2:1:1 21=7,4@3:1 22=5,7@1:1",
        "00=4,3,1@2:1:1",
        "01=4,1@3:1",
        "02=4,2@3:1",
        "10=4,3@3:1",
        "11=4",
    )),
    ((200, 204), (
        "?7,3 10=4 20=4,6@3:1 21=4 22=4,5@3:1 | 10=4,3@3:1 20=7,3@1:1 21=7,4@3:1 22=4,5,7@2:1:1",
        "00=4,0@3:1",
        "01=4,1@3:1",
        "02=4,1,5@2:1:1",
        "11=4",
        "12=4,5@3:1",
    )),
    ((73, 77), (
        "?7,3 00=4,1@3:1 10=4 20=4,6@3:1 21=4 | 00=4,3,1@2:1:1 10=3,4@3:1 20=7,3@1:1 21=4,7@3:1",
        "01=4,1@3:1",
        "02=4,1,5@2:1:1",
        "11=4",
        "12=4,5@3:1",
        "22=4,8@3:1",
    )),
    ((42, 170), (
        "?3,1 00=4,0@3:1 01=4 10=4 20=4,7@3:1 | 00=3,1@1:1 01=4,1@3:1 10=3,4@3:1 20=4,7,3@2:1:1",
        "02=4,2@3:1",
        "11=4",
        "12=4,5@3:1",
        "21=4,7@3:1",
        "22=4,5,7@2:1:1",
    )),
    ((14, 142), (
        "?3,1 00=4,0@3:1 01=4 02=4,5@3:1 10=4 | 00=3,1@1:1 01=1,4@3:1 02=4,1,5@2:1:1 10=4,3@3:1",
        "11=4",
        "12=4,5@3:1",
        "20=4,6@3:1",
        "21=4,7@3:1",
        "22=4,5,7@2:1:1",
    )),
    ((67,), (
        "00=4,3@3:1",
        "01=4",
        "02=4,2@3:1",
        "10=4,3@3:1",
        "11=4",
        "12=4,5@3:1",
        "20=4,6@3:1",
        "21=4",
        "22=4,8@3:1",
    )),
    ((70,), (
        "00=4,0@3:1",
        "01=4",
        "02=4,5@3:1",
        "10=4,3@3:1",
        "11=4",
        "12=4,5@3:1",
        "20=4,6@3:1",
        "21=4",
        "22=4,8@3:1",
    )),
    ((28,), (
        "00=4,0@3:1",
        "01=4,1@3:1",
        "02=4,1@3:1",
        "10=4",
        "11=4",
        "12=4",
        "20=4,6@3:1",
        "21=4,7@3:1",
        "22=4,8@3:1",
    )),
    ((152,), (
        "00=4,0@3:1",
        "01=4,1@3:1",
        "02=4,2@3:1",
        "10=4",
        "11=4",
        "12=4",
        "20=4,6@3:1",
        "21=4,7@3:1",
        "22=4,7@3:1",
    )),
    ((194,), (
        "00=4,0@3:1",
        "01=4",
        "02=4,2@3:1",
        "10=4,3@3:1",
        "11=4",
        "12=4,5@3:1",
        "20=4,6@3:1",
        "21=4",
        "22=4,5@3:1",
    )),
    ((98,), (
        "00=4,0@3:1",
        "01=4",
        "02=4,2@3:1",
        "10=4,3@3:1",
        "11=4",
        "12=4,5@3:1",
        "20=4,3@3:1",
        "21=4",
        "22=4,8@3:1",
    )),
    ((56,), (
        "00=4,0@3:1",
        "01=4,1@3:1",
        "02=4,2@3:1",
        "10=4",
        "11=4",
        "12=4",
        "20=4,7@3:1",
        "21=4,7@3:1",
        "22=4,8@3:1",
    )),
    ((25,), (
        "00=4,1@3:1",
        "01=4,1@3:1",
        "02=4,2@3:1",
        "10=4",
        "11=4",
        "12=4",
        "20=4,6@3:1",
        "21=4,7@3:1",
        "22=4,8@3:1",
    )),
    ((26, 31), (
        "?3,1 00=4 10=4 | 00=4,3,1@2:7:7 10=4,3@7:1",
        "01=4",
        "?1,5 02=4 12=4 | 02=4,1,5@2:7:7 12=4,5@7:1",
        "11=4",
        "20=4,6@3:1",
        "21=4,7@3:1",
        "22=4,8@3:1",
    )),
    ((82, 214), (
        "00=4,0@3:1",
        "?1,5 01=4 02=4 | 01=4,1@7:1 02=4,1,5@2:7:7",
        "10=4,3@3:1",
        "11=4",
        "12=4",
        "20=4,6@3:1",
        "?5,7 21=4 22=4 | 21=4,7@7:1 22=4,5,7@2:7:7",
    )),
    ((88, 248), (
        "00=4,0@3:1",
        "01=4,1@3:1",
        "02=4,2@3:1",
        "11=4",
        "?7,3 10=4 20=4 | 10=4,3@7:1 20=4,7,3@2:7:7",
        "21=4",
        "?5,7 12=4 22=4 | 12=4,5@7:1 22=4,5,7@2:7:7",
    )),
    ((74, 107), (
        "?3,1 00=4 01=4 | 00=4,3,1@2:7:7 01=4,1@7:1",
        "02=4,2@3:1",
        "10=4",
        "11=4",
        "12=4,5@3:1",
        "?7,3 20=4 21=4 | 20=4,7,3@2:7:7 21=4,7@7:1",
        "22=4,8@3:1",
    )),
    ((27,), (
        "?3,1 00=4 01=4 10=4 | 00=4,3,1@2:7:7 01=4,1@7:1 10=4,3@7:1",
        "02=4,2@3:1",
        "11=4",
        "12=4",
        "20=4,6@3:1",
        "21=4,7@3:1",
        "22=4,8@3:1",
    )),
    ((86,), (
        "00=4,0@3:1",
        "?1,5 01=4 02=4 12=4 | 01=4,1@7:1 02=4,1,5@2:7:7 12=4,5@7:1",
        "10=4,3@3:1",
        "11=4",
        "20=4,6@3:1",
        "21=4",
        "22=4,8@3:1",
    )),
    ((216,), (
        "00=4,0@3:1",
        "01=4,1@3:1",
        "02=4,2@3:1",
        "10=4",
        "11=4",
        "20=4,6@3:1",
        "?5,7 12=4 21=4 22=4 | 12=4,5@7:1 21=4,7@7:1 22=4,5,7@2:7:7",
    )),
    ((106,), (
        "00=4,0@3:1",
        "01=4",
        "02=4,2@3:1",
        "11=4",
        "12=4,5@3:1",
        "?7,3 10=4 20=4 21=4 | 10=4,3@7:1 20=4,7,3@2:7:7 21=4,7@7:1",
        "22=4,8@3:1",
    )),
    ((30,), (
        "00=4,0@3:1",
        "?1,5 01=4 02=4 12=4 | 01=4,1@7:1 02=4,1,5@2:7:7 12=4,5@7:1",
        "10=4",
        "11=4",
        "20=4,6@3:1",
        "21=4,7@3:1",
        "22=4,8@3:1",
    )),
    ((210,), (
        "00=4,0@3:1",
        "01=4",
        "02=4,2@3:1",
        "10=4,3@3:1",
        "11=4",
        "20=4,6@3:1",
        "?5,7 12=4 21=4 22=4 | 12=4,5@7:1 21=4,7@7:1 22=4,5,7@2:7:7",
    )),
    ((120,), (
        "00=4,0@3:1",
        "01=4,1@3:1",
        "02=4,2@3:1",
        "11=4",
        "12=4",
        "?7,3 10=4 20=4 21=4 | 10=4,3@7:1 20=4,7,3@2:7:7 21=4,7@7:1",
        "22=4,8@3:1",
    )),
    ((75,), (
        "?3,1 00=4 01=4 10=4 | 00=4,3,1@2:7:7 01=4,1@7:1 10=4,3@7:1",
        "02=4,2@3:1",
        "11=4",
        "12=4,5@3:1",
        "20=4,6@3:1",
        "21=4",
        "22=4,8@3:1",
    )),
    ((29,), (
        "00=4,1@3:1",
        "01=4,1@3:1",
        "02=4,1@3:1",
        "10=4",
        "11=4",
        "12=4",
        "20=4,6@3:1",
        "21=4,7@3:1",
        "22=4,8@3:1",
    )),
    ((198,), (
        "00=4,0@3:1",
        "01=4",
        "02=4,5@3:1",
        "10=4,3@3:1",
        "11=4",
        "12=4,5@3:1",
        "20=4,6@3:1",
        "21=4",
        "22=4,5@3:1",
    )),
    ((184,), (
        "00=4,0@3:1",
        "01=4,1@3:1",
        "02=4,2@3:1",
        "10=4",
        "11=4",
        "12=4",
        "20=4,7@3:1",
        "21=4,7@3:1",
        "22=4,7@3:1",
    )),
    ((99,), (
        "00=4,3@3:1",
        "01=4",
        "02=4,2@3:1",
        "10=4,3@3:1",
        "11=4",
        "12=4,5@3:1",
        "20=4,3@3:1",
        "21=4",
        "22=4,8@3:1",
    )),
    ((57,), (
        "00=4,1@3:1",
        "01=4,1@3:1",
        "02=4,2@3:1",
        "10=4",
        "11=4",
        "12=4",
        "20=4,7@3:1",
        "21=4,7@3:1",
        "22=4,8@3:1",
    )),
    ((71,), (
        "00=4,3@3:1",
        "01=4",
        "02=4,5@3:1",
        "10=4,3@3:1",
        "11=4",
        "12=4,5@3:1",
        "20=4,6@3:1",
        "21=4",
        "22=4,8@3:1",
    )),
    ((156,), (
        "00=4,0@3:1",
        "01=4,1@3:1",
        "02=4,1@3:1",
        "10=4",
        "11=4",
        "12=4",
        "20=4,6@3:1",
        "21=4,7@3:1",
        "22=4,7@3:1",
    )),
    ((226,), (
        "00=4,0@3:1",
        "01=4",
        "02=4,2@3:1",
        "10=4,3@3:1",
        "11=4",
        "12=4,5@3:1",
        "20=4,3@3:1",
        "21=4",
        "22=4,5@3:1",
    )),
    ((60,), (
        "00=4,0@3:1",
        "01=4,1@3:1",
        "02=4,1@3:1",
        "10=4",
        "11=4",
        "12=4",
        "20=4,7@3:1",
        "21=4,7@3:1",
        "22=4,8@3:1",
    )),
    ((195,), (
        "00=4,3@3:1",
        "01=4",
        "02=4,2@3:1",
        "10=4,3@3:1",
        "11=4",
        "12=4,5@3:1",
        "20=4,6@3:1",
        "21=4",
        "22=4,5@3:1",
    )),
    ((102,), (
        "00=4,0@3:1",
        "01=4",
        "02=4,5@3:1",
        "10=4,3@3:1",
        "11=4",
        "12=4,5@3:1",
        "20=4,3@3:1",
        "21=4",
        "22=4,8@3:1",
    )),
    ((153,), (
        "00=4,1@3:1",
        "01=4,1@3:1",
        "02=4,2@3:1",
        "10=4",
        "11=4",
        "12=4",
        "20=4,6@3:1",
        "21=4,7@3:1",
        "22=4,7@3:1",
    )),
    ((58,), (
        "?3,1 00=4,0@3:1 | 00=4,3,1@2:1:1",
        "01=4",
        "?1,5 02=4,2@3:1 | 02=4,1,5@2:1:1",
        "10=4",
        "11=4",
        "12=4",
        "20=4,7@3:1",
        "21=4,7@3:1",
        "22=4,8@3:1",
    )),
    ((83,), (
        "00=4,3@3:1",
        "01=4",
        "?1,5 02=4,2@3:1 | 02=4,1,5@2:1:1",
        "10=4,3@3:1",
        "11=4",
        "12=4",
        "20=4,6@3:1",
        "21=4",
        "?5,7 22=4,8@3:1 | 22=4,5,7@2:1:1",
    )),
    ((92,), (
        "00=4,0@3:1",
        "01=4,1@3:1",
        "02=4,1@3:1",
        "10=4",
        "11=4",
        "12=4",
        "?7,3 20=4,6@3:1 | 20=4,7,3@2:1:1",
        "21=4",
        "?5,7 22=4,8@3:1 | 22=4,5,7@2:1:1",
    )),
    ((202,), (
        "?3,1 00=4,0@3:1 | 00=4,3,1@2:1:1",
        "01=4",
        "02=4,2@3:1",
        "10=4",
        "11=4",
        "12=4,5@3:1",
        "?7,3 20=4,6@3:1 | 20=4,7,3@2:1:1",
        "21=4",
        "22=4,5@3:1",
    )),
    ((78,), (
        "?3,1 00=4,0@3:1 | 00=4,3,1@2:1:1",
        "01=4",
        "02=4,5@3:1",
        "10=4",
        "11=4",
        "12=4,5@3:1",
        "?7,3 20=4,6@3:1 | 20=4,7,3@2:1:1",
        "21=4",
        "22=4,8@3:1",
    )),
    ((154,), (
        "?3,1 00=4,0@3:1 | 00=4,3,1@2:1:1",
        "01=4",
        "?1,5 02=4,2@3:1 | 02=4,1,5@2:1:1",
        "10=4",
        "11=4",
        "12=4",
        "20=4,6@3:1",
        "21=4,7@3:1",
        "22=4,7@3:1",
    )),
    ((114,), (
        "00=4,0@3:1",
        "01=4",
        "?1,5 02=4,2@3:1 | 02=4,1,5@2:1:1",
        "10=4,3@3:1",
        "11=4",
        "12=4",
        "20=4,3@3:1",
        "21=4",
        "?5,7 22=4,8@3:1 | 22=4,5,7@2:1:1",
    )),
    ((89,), (
        "00=4,1@3:1",
        "01=4,1@3:1",
        "02=4,2@3:1",
        "10=4",
        "11=4",
        "12=4",
        "?7,3 20=4,6@3:1 | 20=4,7,3@2:1:1",
        "21=4",
        "?5,7 22=4,8@3:1 | 22=4,5,7@2:1:1",
    )),
    ((90,), (
        "?3,1 00=4,0@3:1 | 00=4,3,1@2:1:1",
        "01=4",
        "?1,5 02=4,2@3:1 | 02=4,1,5@2:1:1",
        "10=4",
        "11=4",
        "12=4",
        "?7,3 20=4,6@3:1 | 20=4,7,3@2:1:1",
        "21=4",
        "?5,7 22=4,8@3:1 | 22=4,5,7@2:1:1",
    )),
    ((55, 23), (
        "?1,5 00=4,3@3:1 01=4 02=4 12=4 | 00=4,3,1@2:1:1 01=1,4@3:1 02=1,5@1:1 12=4,5@3:1",
        "10=4,3@3:1",
        "11=4",
        "20=4,7,3@2:1:1",
        "21=4,7@3:1",
        "22=4,8@3:1",
    )),
    ((182, 150), (
        "?1,5 01=4 02=4 12=4 22=4,7@3:1 | 01=4,1@3:1 02=1,5@1:1 12=5,4@3:1 22=4,5,7@2:1:1",
        "00=4,0@3:1",
        "10=4,3@3:1",
        "11=4",
        "20=4,7,3@2:1:1",
        "21=4,7@3:1",
    )),
    ((213, 212), (
        "?5,7 02=4,1@3:1 12=4 21=4 22=4 | 02=4,1,5@2:1:1 12=5,4@3:1 21=4,7@3:1 22=5,7@1:1",
        "00=4,3,1@2:1:1",
        "01=4,1@3:1",
        "10=4,3@3:1",
        "11=4",
        "20=4,6@3:1",
    )),
    ((241, 240), (
        "?5,7 12=4 20=4,3@3:1 21=4 22=4 | 12=4,5@3:1 20=4,7,3@2:1:1 21=7,4@3:1 22=5,7@1:1",
        "00=4,3,1@2:1:1",
        "01=4,1@3:1",
        "02=4,2@3:1",
        "10=4,3@3:1",
        "11=4",
    )),
    ((236, 232), (
        "?7,3 10=4 20=4 21=4 22=4,5@3:1 | 10=4,3@3:1 20=7,3@1:1 21=7,4@3:1 22=4,5,7@2:1:1",
        "00=4,0@3:1",
        "01=4,1@3:1",
        "02=4,1,5@2:1:1",
        "11=4",
        "12=4,5@3:1",
    )),
    ((109, 105), (
        "?7,3 00=4,1@3:1 10=4 20=4 21=4 | 00=4,3,1@2:1:1 10=3,4@3:1 20=7,3@1:1 21=4,7@3:1",
        "01=4,1@3:1",
        "02=4,1,5@2:1:1",
        "11=4",
        "12=4,5@3:1",
        "22=4,8@3:1",
    )),
    ((171, 43), (
        "?3,1 00=4 01=4 10=4 20=4,7@3:1 | 00=3,1@1:1 01=4,1@3:1 10=3,4@3:1 20=4,7,3@2:1:1",
        "02=4,2@3:1",
        "11=4",
        "12=4,5@3:1",
        "21=4,7@3:1",
        "22=4,5,7@2:1:1",
    )),
    ((143, 15), (
        "?3,1 00=4 01=4 02=4,5@3:1 10=4 | 00=3,1@1:1 01=1,4@3:1 02=4,1,5@2:1:1 10=4,3@3:1",
        "11=4",
        "12=4,5@3:1",
        "20=4,6@3:1",
        "21=4,7@3:1",
        "22=4,5,7@2:1:1",
    )),
    ((124,), (
        "00=4,0@3:1",
        "01=4,1@3:1",
        "02=4,1@3:1",
        "11=4",
        "12=4",
        "?7,3 10=4 20=4 21=4 | 10=4,3@7:1 20=4,7,3@2:7:7 21=4,7@7:1",
        "22=4,8@3:1",
    )),
    ((203,), (
        "?3,1 00=4 01=4 10=4 | 00=4,3,1@2:7:7 01=4,1@7:1 10=4,3@7:1",
        "02=4,2@3:1",
        "11=4",
        "12=4,5@3:1",
        "20=4,6@3:1",
        "21=4",
        "22=4,5@3:1",
    )),
    ((62,), (
        "00=4,0@3:1",
        "?1,5 01=4 02=4 12=4 | 01=4,1@7:1 02=4,1,5@2:7:7 12=4,5@7:1",
        "10=4",
        "11=4",
        "20=4,7@3:1",
        "21=4,7@3:1",
        "22=4,8@3:1",
    )),
    ((211,), (
        "00=4,3@3:1",
        "01=4",
        "02=4,2@3:1",
        "10=4,3@3:1",
        "11=4",
        "20=4,6@3:1",
        "?5,7 12=4 21=4 22=4 | 12=4,5@7:1 21=4,7@7:1 22=4,5,7@2:7:7",
    )),
    ((118,), (
        "00=4,0@3:1",
        "?1,5 01=4 02=4 12=4 | 01=4,1@7:1 02=4,1,5@2:7:7 12=4,5@7:1",
        "10=4,3@3:1",
        "11=4",
        "20=4,3@3:1",
        "21=4",
        "22=4,8@3:1",
    )),
    ((217,), (
        "00=4,1@3:1",
        "01=4,1@3:1",
        "02=4,2@3:1",
        "10=4",
        "11=4",
        "20=4,6@3:1",
        "?5,7 12=4 21=4 22=4 | 12=4,5@7:1 21=4,7@7:1 22=4,5,7@2:7:7",
    )),
    ((110,), (
        "00=4,0@3:1",
        "01=4",
        "02=4,5@3:1",
        "11=4",
        "12=4,5@3:1",
        "?7,3 10=4 20=4 21=4 | 10=4,3@7:1 20=4,7,3@2:7:7 21=4,7@7:1",
        "22=4,8@3:1",
    )),
    ((155,), (
        "?3,1 00=4 01=4 10=4 | 00=4,3,1@2:7:7 01=4,1@7:1 10=4,3@7:1",
        "02=4,2@3:1",
        "11=4",
        "12=4",
        "20=4,6@3:1",
        "21=4,7@3:1",
        "22=4,7@3:1",
    )),
    ((188,), (
        "00=4,0@3:1",
        "01=4,1@3:1",
        "02=4,1@3:1",
        "10=4",
        "11=4",
        "12=4",
        "20=4,7@3:1",
        "21=4,7@3:1",
        "22=4,7@3:1",
    )),
    ((185,), (
        "00=4,1@3:1",
        "01=4,1@3:1",
        "02=4,2@3:1",
        "10=4",
        "11=4",
        "12=4",
        "20=4,7@3:1",
        "21=4,7@3:1",
        "22=4,7@3:1",
    )),
    ((61,), (
        "00=4,1@3:1",
        "01=4,1@3:1",
        "02=4,1@3:1",
        "10=4",
        "11=4",
        "12=4",
        "20=4,7@3:1",
        "21=4,7@3:1",
        "22=4,8@3:1",
    )),
    ((157,), (
        "00=4,1@3:1",
        "01=4,1@3:1",
        "02=4,1@3:1",
        "10=4",
        "11=4",
        "12=4",
        "20=4,6@3:1",
        "21=4,7@3:1",
        "22=4,7@3:1",
    )),
    ((103,), (
        "00=4,3@3:1",
        "01=4",
        "02=4,5@3:1",
        "10=4,3@3:1",
        "11=4",
        "12=4,5@3:1",
        "20=4,3@3:1",
        "21=4",
        "22=4,8@3:1",
    )),
    ((227,), (
        "00=4,3@3:1",
        "01=4",
        "02=4,2@3:1",
        "10=4,3@3:1",
        "11=4",
        "12=4,5@3:1",
        "20=4,3@3:1",
        "21=4",
        "22=4,5@3:1",
    )),
    ((230,), (
        "00=4,0@3:1",
        "01=4",
        "02=4,5@3:1",
        "10=4,3@3:1",
        "11=4",
        "12=4,5@3:1",
        "20=4,3@3:1",
        "21=4",
        "22=4,5@3:1",
    )),
    ((199,), (
        "00=4,3@3:1",
        "01=4",
        "02=4,5@3:1",
        "10=4,3@3:1",
        "11=4",
        "12=4,5@3:1",
        "20=4,6@3:1",
        "21=4",
        "22=4,5@3:1",
    )),
    ((220,), (
        "00=4,0@3:1",
        "01=4,1@3:1",
        "02=4,1@3:1",
        "10=4",
        "11=4",
        "?7,3 20=4,6@3:1 | 20=4,7,3@2:1:1",
        "?5,7 12=4 21=4 22=4 | 12=4,5@7:1 21=4,7@7:1 22=4,5,7@2:7:7",
    )),
    ((158,), (
        "?3,1 00=4,0@3:1 | 00=4,3,1@2:1:1",
        "?1,5 01=4 02=4 12=4 | 01=4,1@7:1 02=4,1,5@2:7:7 12=4,5@7:1",
        "10=4",
        "11=4",
        "20=4,6@3:1",
        "21=4,7@3:1",
        "22=4,7@3:1",
    )),
    ((234,), (
        "?3,1 00=4,0@3:1 | 00=4,3,1@2:1:1",
        "01=4",
        "02=4,2@3:1",
        "11=4",
        "12=4,5@3:1",
        "?7,3 10=4 20=4 21=4 | 10=4,3@7:1 20=4,7,3@2:7:7 21=4,7@7:1",
        "22=4,5@3:1",
    )),
    ((242,), (
        "00=4,0@3:1",
        "01=4",
        "?1,5 02=4,2@3:1 | 02=4,1,5@2:1:1",
        "10=4,3@3:1",
        "11=4",
        "20=4,3@3:1",
        "?5,7 12=4 21=4 22=4 | 12=4,5@7:1 21=4,7@7:1 22=4,5,7@2:7:7",
    )),
    ((59,), (
        "?3,1 00=4 01=4 10=4 | 00=4,3,1@2:7:7 01=4,1@7:1 10=4,3@7:1",
        "?1,5 02=4,2@3:1 | 02=4,1,5@2:1:1",
        "11=4",
        "12=4",
        "20=4,7@3:1",
        "21=4,7@3:1",
        "22=4,8@3:1",
    )),
    ((121,), (
        "00=4,1@3:1",
        "01=4,1@3:1",
        "02=4,2@3:1",
        "11=4",
        "12=4",
        "?7,3 10=4 20=4 21=4 | 10=4,3@7:1 20=4,7,3@2:7:7 21=4,7@7:1",
        "?5,7 22=4,8@3:1 | 22=4,5,7@2:1:1",
    )),
    ((87,), (
        "00=4,3@3:1",
        "?1,5 01=4 02=4 12=4 | 01=4,1@7:1 02=4,1,5@2:7:7 12=4,5@7:1",
        "10=4,3@3:1",
        "11=4",
        "20=4,6@3:1",
        "21=4",
        "?5,7 22=4,8@3:1 | 22=4,5,7@2:1:1",
    )),
    ((79,), (
        "?3,1 00=4 01=4 10=4 | 00=4,3,1@2:7:7 01=4,1@7:1 10=4,3@7:1",
        "02=4,5@3:1",
        "11=4",
        "12=4,5@3:1",
        "?7,3 20=4,6@3:1 | 20=4,7,3@2:1:1",
        "21=4",
        "22=4,8@3:1",
    )),
    ((122,), (
        "?3,1 00=4,0@3:1 | 00=4,3,1@2:1:1",
        "01=4",
        "?1,5 02=4,2@3:1 | 02=4,1,5@2:1:1",
        "11=4",
        "12=4",
        "?7,3 10=4 20=4 21=4 | 10=4,3@7:1 20=4,7,3@2:7:7 21=4,7@7:1",
        "?5,7 22=4,8@3:1 | 22=4,5,7@2:1:1",
    )),
    ((94,), (
        "?3,1 00=4,0@3:1 | 00=4,3,1@2:1:1",
        "?1,5 01=4 02=4 12=4 | 01=4,1@7:1 02=4,1,5@2:7:7 12=4,5@7:1",
        "10=4",
        "11=4",
        "?7,3 20=4,6@3:1 | 20=4,7,3@2:1:1",
        "21=4",
        "?5,7 22=4,8@3:1 | 22=4,5,7@2:1:1",
    )),
    ((218,), (
        "?3,1 00=4,0@3:1 | 00=4,3,1@2:1:1",
        "01=4",
        "?1,5 02=4,2@3:1 | 02=4,1,5@2:1:1",
        "10=4",
        "11=4",
        "?7,3 20=4,6@3:1 | 20=4,7,3@2:1:1",
        "?5,7 12=4 21=4 22=4 | 12=4,5@7:1 21=4,7@7:1 22=4,5,7@2:7:7",
    )),
    ((91,), (
        "?3,1 00=4 01=4 10=4 | 00=4,3,1@2:7:7 01=4,1@7:1 10=4,3@7:1",
        "?1,5 02=4,2@3:1 | 02=4,1,5@2:1:1",
        "11=4",
        "12=4",
        "?7,3 20=4,6@3:1 | 20=4,7,3@2:1:1",
        "21=4",
        "?5,7 22=4,8@3:1 | 22=4,5,7@2:1:1",
    )),
    ((229,), (
        "00=4,3,1@2:1:1",
        "01=4,1@3:1",
        "02=4,1,5@2:1:1",
        "10=4,3@3:1",
        "11=4",
        "12=4,5@3:1",
        "20=4,3@3:1",
        "21=4",
        "22=4,5@3:1",
    )),
    ((167,), (
        "00=4,3@3:1",
        "01=4",
        "02=4,5@3:1",
        "10=4,3@3:1",
        "11=4",
        "12=4,5@3:1",
        "20=4,7,3@2:1:1",
        "21=4,7@3:1",
        "22=4,5,7@2:1:1",
    )),
    ((173,), (
        "00=4,1@3:1",
        "01=4,1@3:1",
        "02=4,1,5@2:1:1",
        "10=4",
        "11=4",
        "12=4,5@3:1",
        "20=4,7@3:1",
        "21=4,7@3:1",
        "22=4,5,7@2:1:1",
    )),
    ((181,), (
        "00=4,3,1@2:1:1",
        "01=4,1@3:1",
        "02=4,1@3:1",
        "10=4,3@3:1",
        "11=4",
        "12=4",
        "20=4,7,3@2:1:1",
        "21=4,7@3:1",
        "22=4,7@3:1",
    )),
    ((186,), (
        "?3,1 00=4,0@3:1 | 00=4,3,1@2:1:1",
        "01=4",
        "?1,5 02=4,2@3:1 | 02=4,1,5@2:1:1",
        "10=4",
        "11=4",
        "12=4",
        "20=4,7@3:1",
        "21=4,7@3:1",
        "22=4,7@3:1",
    )),
    ((115,), (
        "00=4,3@3:1",
        "01=4",
        "?1,5 02=4,2@3:1 | 02=4,1,5@2:1:1",
        "10=4,3@3:1",
        "11=4",
        "12=4",
        "20=4,3@3:1",
        "21=4",
        "?5,7 22=4,8@3:1 | 22=4,5,7@2:1:1",
    )),
    ((93,), (
        "00=4,1@3:1",
        "01=4,1@3:1",
        "02=4,1@3:1",
        "10=4",
        "11=4",
        "12=4",
        "?7,3 20=4,6@3:1 | 20=4,7,3@2:1:1",
        "21=4",
        "?5,7 22=4,8@3:1 | 22=4,5,7@2:1:1",
    )),
    ((206,), (
        "?3,1 00=4,0@3:1 | 00=4,3,1@2:1:1",
        "01=4",
        "02=4,5@3:1",
        "10=4",
        "11=4",
        "12=4,5@3:1",
        "?7,3 20=4,6@3:1 | 20=4,7,3@2:1:1",
        "21=4",
        "22=4,5@3:1",
    )),
    ((205, 201), (
        "00=4,1@3:1",
        "01=4,1@3:1",
        "02=4,1,5@2:1:1",
        "10=4",
        "11=4",
        "12=4,5@3:1",
        "?7,3 20=4,6@3:1 | 20=4,7,3@2:1:1",
        "21=4",
        "22=4,5@3:1",
    )),
    ((174, 46), (
        "?3,1 00=4,0@3:1 | 00=4,3,1@2:1:1",
        "01=4",
        "02=4,5@3:1",
        "10=4",
        "11=4",
        "12=4,5@3:1",
        "20=4,7@3:1",
        "21=4,7@3:1",
        "22=4,5,7@2:1:1",
    )),
    ((179, 147), (
        "00=4,3@3:1",
        "01=4",
        "?1,5 02=4,2@3:1 | 02=4,1,5@2:1:1",
        "10=4,3@3:1",
        "11=4",
        "12=4",
        "20=4,7,3@2:1:1",
        "21=4,7@3:1",
        "22=4,7@3:1",
    )),
    ((117, 116), (
        "00=4,3,1@2:1:1",
        "01=4,1@3:1",
        "02=4,1@3:1",
        "10=4,3@3:1",
        "11=4",
        "12=4",
        "20=4,3@3:1",
        "21=4",
        "?5,7 22=4,8@3:1 | 22=4,5,7@2:1:1",
    )),
    ((189,), (
        "00=4,1@3:1",
        "01=4,1@3:1",
        "02=4,1@3:1",
        "10=4",
        "11=4",
        "12=4",
        "20=4,7@3:1",
        "21=4,7@3:1",
        "22=4,7@3:1",
    )),
    ((231,), (
        "00=4,3@3:1",
        "01=4",
        "02=4,5@3:1",
        "10=4,3@3:1",
        "11=4",
        "12=4,5@3:1",
        "20=4,3@3:1",
        "21=4",
        "22=4,5@3:1",
    )),
    ((126,), (
        "00=4,0@3:1",
        "?1,5 01=4 02=4 12=4 | 01=4,1@7:1 02=4,1,5@2:7:7 12=4,5@7:1",
        "11=4",
        "?7,3 10=4 20=4 21=4 | 10=4,3@7:1 20=4,7,3@2:7:7 21=4,7@7:1",
        "22=4,8@3:1",
    )),
    ((219,), (
        "?3,1 00=4 01=4 10=4 | 00=4,3,1@2:7:7 01=4,1@7:1 10=4,3@7:1",
        "02=4,2@3:1",
        "11=4",
        "20=4,6@3:1",
        "?5,7 12=4 21=4 22=4 | 12=4,5@7:1 21=4,7@7:1 22=4,5,7@2:7:7",
    )),
    ((125,), (
        "?7,3 00=4,1@3:1 10=4 20=4 21=4 | 00=4,3,1@2:1:1 10=3,4@3:1 20=7,3@1:1 21=4,7@3:1",
        "01=4,1@3:1",
        "02=4,1@3:1",
        "11=4",
        "12=4",
        "22=4,8@3:1",
    )),
    ((221,), (
        "?5,7 02=4,1@3:1 12=4 21=4 22=4 | 02=4,1,5@2:1:1 12=5,4@3:1 21=4,7@3:1 22=5,7@1:1",
        "00=4,1@3:1",
        "01=4,1@3:1",
        "10=4",
        "11=4",
        "20=4,6@3:1",
    )),
    ((207,), (
        "?3,1 00=4 01=4 02=4,5@3:1 10=4 | 00=3,1@1:1 01=1,4@3:1 02=4,1,5@2:1:1 10=4,3@3:1",
        "11=4",
        "12=4,5@3:1",
        "20=4,6@3:1",
        "21=4",
        "22=4,5@3:1",
    )),
    ((238,), (
        "?7,3 10=4 20=4 21=4 22=4,5@3:1 | 10=4,3@3:1 20=7,3@1:1 21=7,4@3:1 22=4,5,7@2:1:1",
        "00=4,0@3:1",
        "01=4",
        "02=4,5@3:1",
        "11=4",
        "12=4,5@3:1",
    )),
    ((190,), (
        "?1,5 01=4 02=4 12=4 22=4,7@3:1 | 01=4,1@3:1 02=1,5@1:1 12=5,4@3:1 22=4,5,7@2:1:1",
        "00=4,0@3:1",
        "10=4",
        "11=4",
        "20=4,7@3:1",
        "21=4,7@3:1",
    )),
    ((187,), (
        "?3,1 00=4 01=4 10=4 20=4,7@3:1 | 00=3,1@1:1 01=4,1@3:1 10=3,4@3:1 20=4,7,3@2:1:1",
        "02=4,2@3:1",
        "11=4",
        "12=4",
        "21=4,7@3:1",
        "22=4,7@3:1",
    )),
    ((243,), (
        "?5,7 12=4 20=4,3@3:1 21=4 22=4 | 12=4,5@3:1 20=4,7,3@2:1:1 21=7,4@3:1 22=5,7@1:1",
        "00=4,3@3:1",
        "01=4",
        "02=4,2@3:1",
        "10=4,3@3:1",
        "11=4",
    )),
    ((119,), (
        "?1,5 00=4,3@3:1 01=4 02=4 12=4 | 00=4,3,1@2:1:1 01=1,4@3:1 02=1,5@1:1 12=4,5@3:1",
        "10=4,3@3:1",
        "11=4",
        "20=4,3@3:1",
        "21=4",
        "22=4,8@3:1",
    )),
    ((237, 233), (
        "00=4,1@3:1",
        "01=4,1@3:1",
        "02=4,1,5@2:1:1",
        "10=4",
        "11=4",
        "12=4,5@3:1",
        "?7,3 20=4 | 20=4,7,3@2:1:1",
        "21=4",
        "22=4,5@3:1",
    )),
    ((175, 47), (
        "?3,1 00=4 | 00=4,3,1@2:1:1",
        "01=4",
        "02=4,5@3:1",
        "10=4",
        "11=4",
        "12=4,5@3:1",
        "20=4,7@3:1",
        "21=4,7@3:1",
        "22=4,5,7@2:1:1",
    )),
    ((183, 151), (
        "00=4,3@3:1",
        "01=4",
        "?1,5 02=4 | 02=4,1,5@2:1:1",
        "10=4,3@3:1",
        "11=4",
        "12=4",
        "20=4,7,3@2:1:1",
        "21=4,7@3:1",
        "22=4,7@3:1",
    )),
    ((245, 244), (
        "00=4,3,1@2:1:1",
        "01=4,1@3:1",
        "02=4,1@3:1",
        "10=4,3@3:1",
        "11=4",
        "12=4",
        "20=4,3@3:1",
        "21=4",
        "?5,7 22=4 | 22=4,5,7@2:1:1",
    )),
    ((250,), (
        "00=4,0@3:1",
        "01=4",
        "02=4,2@3:1",
        "11=4",
        "?7,3 10=4 20=4 | 10=4,3@7:1 20=4,7,3@2:7:7",
        "21=4",
        "?5,7 12=4 22=4 | 12=4,5@7:1 22=4,5,7@2:7:7",
    )),
    ((123,), (
        "?3,1 00=4 01=4 | 00=4,3,1@2:7:7 01=4,1@7:1",
        "02=4,2@3:1",
        "10=4",
        "11=4",
        "12=4",
        "?7,3 20=4 21=4 | 20=4,7,3@2:7:7 21=4,7@7:1",
        "22=4,8@3:1",
    )),
    ((95,), (
        "?3,1 00=4 10=4 | 00=4,3,1@2:7:7 10=4,3@7:1",
        "01=4",
        "?1,5 02=4 12=4 | 02=4,1,5@2:7:7 12=4,5@7:1",
        "11=4",
        "20=4,6@3:1",
        "21=4",
        "22=4,8@3:1",
    )),
    ((222,), (
        "00=4,0@3:1",
        "?1,5 01=4 02=4 | 01=4,1@7:1 02=4,1,5@2:7:7",
        "10=4",
        "11=4",
        "12=4",
        "20=4,6@3:1",
        "?5,7 21=4 22=4 | 21=4,7@7:1 22=4,5,7@2:7:7",
    )),
    ((252,), (
        "00=4,0@3:1",
        "01=4,1@3:1",
        "02=4,1@3:1",
        "11=4",
        "12=4",
        "?7,3 10=4 20=4 | 10=4,3@7:1 20=4,7,3@2:7:7",
        "21=4",
        "?5,7 22=4 | 22=4,5,7@2:1:1",
    )),
    ((249,), (
        "00=4,1@3:1",
        "01=4,1@3:1",
        "02=4,2@3:1",
        "10=4",
        "11=4",
        "?7,3 20=4 | 20=4,7,3@2:1:1",
        "21=4",
        "?5,7 12=4 22=4 | 12=4,5@7:1 22=4,5,7@2:7:7",
    )),
    ((235,), (
        "?3,1 00=4 01=4 | 00=4,3,1@2:7:7 01=4,1@7:1",
        "02=4,2@3:1",
        "10=4",
        "11=4",
        "12=4,5@3:1",
        "?7,3 20=4 | 20=4,7,3@2:1:1",
        "21=4",
        "22=4,5@3:1",
    )),
    ((111,), (
        "?3,1 00=4 | 00=4,3,1@2:1:1",
        "01=4",
        "02=4,5@3:1",
        "10=4",
        "11=4",
        "12=4,5@3:1",
        "?7,3 20=4 21=4 | 20=4,7,3@2:7:7 21=4,7@7:1",
        "22=4,8@3:1",
    )),
    ((63,), (
        "?3,1 00=4 | 00=4,3,1@2:1:1",
        "01=4",
        "?1,5 02=4 12=4 | 02=4,1,5@2:7:7 12=4,5@7:1",
        "10=4",
        "11=4",
        "20=4,7@3:1",
        "21=4,7@3:1",
        "22=4,8@3:1",
    )),
    ((159,), (
        "?3,1 00=4 10=4 | 00=4,3,1@2:7:7 10=4,3@7:1",
        "01=4",
        "?1,5 02=4 | 02=4,1,5@2:1:1",
        "11=4",
        "12=4",
        "20=4,6@3:1",
        "21=4,7@3:1",
        "22=4,7@3:1",
    )),
    ((215,), (
        "00=4,3@3:1",
        "01=4",
        "?1,5 02=4 | 02=4,1,5@2:1:1",
        "10=4,3@3:1",
        "11=4",
        "12=4",
        "20=4,6@3:1",
        "?5,7 21=4 22=4 | 21=4,7@7:1 22=4,5,7@2:7:7",
    )),
    ((246,), (
        "00=4,0@3:1",
        "?1,5 01=4 02=4 | 01=4,1@7:1 02=4,1,5@2:7:7",
        "10=4,3@3:1",
        "11=4",
        "12=4",
        "20=4,3@3:1",
        "21=4",
        "?5,7 22=4 | 22=4,5,7@2:1:1",
    )),
    ((254,), (
        "00=4,0@3:1",
        "?1,5 01=4 02=4 | 01=4,1@7:1 02=4,1,5@2:7:7",
        "11=4",
        "?7,3 10=4 20=4 | 10=4,3@7:1 20=4,7,3@2:7:7",
        "?5,7 12=4 21=4 22=4 | 12=4,5@7:1 21=4,7@7:1 22=4,5,7@2:1:1",
    )),
    ((253,), (
        "00=4,1@3:1",
        "01=4,1@3:1",
        "02=4,1@3:1",
        "10=4",
        "11=4",
        "12=4",
        "?7,3 20=4 | 20=4,7,3@2:1:1",
        "21=4",
        "?5,7 22=4 | 22=4,5,7@2:1:1",
    )),
    ((251,), (
        "?3,1 00=4 01=4 | 00=4,3,1@2:7:7 01=4,1@7:1",
        "02=4,2@3:1",
        "11=4",
        "?7,3 10=4 20=4 21=4 | 10=4,3@7:1 20=4,7,3@2:1:1 21=4,7@7:1",
        "?5,7 12=4 22=4 | 12=4,5@7:1 22=4,5,7@2:7:7",
    )),
    ((239,), (
        "?3,1 00=4 | 00=4,3,1@2:1:1",
        "01=4",
        "02=4,5@3:1",
        "10=4",
        "11=4",
        "12=4,5@3:1",
        "?7,3 20=4 | 20=4,7,3@2:1:1",
        "21=4",
        "22=4,5@3:1",
    )),
    ((127,), (
        "?3,1 00=4 01=4 10=4 | 00=4,3,1@2:1:1 01=4,1@7:1 10=4,3@7:1",
        "?1,5 02=4 12=4 | 02=4,1,5@2:7:7 12=4,5@7:1",
        "11=4",
        "?7,3 20=4 21=4 | 20=4,7,3@2:7:7 21=4,7@7:1",
        "22=4,8@3:1",
    )),
    ((191,), (
        "?3,1 00=4 | 00=4,3,1@2:1:1",
        "01=4",
        "?1,5 02=4 | 02=4,1,5@2:1:1",
        "10=4",
        "11=4",
        "12=4",
        "20=4,7@3:1",
        "21=4,7@3:1",
        "22=4,7@3:1",
    )),
    ((223,), (
        "?3,1 00=4 10=4 | 00=4,3,1@2:7:7 10=4,3@7:1",
        "?1,5 01=4 02=4 12=4 | 01=4,1@7:1 02=4,1,5@2:1:1 12=4,5@7:1",
        "11=4",
        "20=4,6@3:1",
        "?5,7 21=4 22=4 | 21=4,7@7:1 22=4,5,7@2:7:7",
    )),
    ((247,), (
        "00=4,3@3:1",
        "01=4",
        "?1,5 02=4 | 02=4,1,5@2:1:1",
        "10=4,3@3:1",
        "11=4",
        "12=4",
        "20=4,3@3:1",
        "21=4",
        "?5,7 22=4 | 22=4,5,7@2:1:1",
    )),
    ((255,), (
        "?3,1 00=4 | 00=4,3,1@2:1:1",
        "01=4",
        "?1,5 02=4 | 02=4,1,5@2:1:1",
        "10=4",
        "11=4",
        "12=4",
        "?7,3 20=4 | 20=4,7,3@2:1:1",
        "21=4",
        "?5,7 22=4 | 22=4,5,7@2:1:1",
    )),
)
