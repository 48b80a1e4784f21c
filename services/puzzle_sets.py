"""
謎題資料：十組具名的 PuzzleSet

每組包含兩條節點軌道（SYS-01 / SYS-02），每條三關：
- L1 EASY：暖身，答案是隊伍代號
- L2 MEDIUM：解出的單字就是 L3 的方法或金鑰
- L3 HARD：最終關鍵字，提示會引用 L2

宣告順序即為 PuzzleCatalog 循環分配的順序，不要任意調整。
"""
from typing import Dict

from models import Level, PuzzleSet


def _level(keyword: str, checksum: int, cipher_type: str, cipher_text: str, *hints: str) -> Level:
    return Level(
        keyword=keyword,
        checksum=checksum,
        cipher_type=cipher_type,
        cipher_text=cipher_text,
        hints=tuple(hints),
    )


PUZZLE_SETS: Dict[str, PuzzleSet] = {
    # ALPHA: final keyword VICTORY, checksum 112
    "ALPHA": PuzzleSet(
        (
            # L1 easy, number pattern: alpha
            _level("alpha", 38, "NUMBER PATTERN",
                "01 -- 12 -- 16 -- 08 -- 01",
                "[HINT 1] Each number is a letter's position (A=1 … Z=26).",
                "[HINT 2] Map: 01=A  08=H  12=L  16=P",
                "[HINT 3] 5 numbers → 5 letters. The word is your team code-name."),

            # L2 medium, anagram: seven
            _level("seven", 65, "ANAGRAM",
                "SCRAMBLED: V -- E -- S -- E -- N",
                "[HINT 1] Rearrange ALL 5 letters to form a common English number word.",
                "[HINT 2] The word names a quantity between one and ten. It has two E's.",
                "[HINT 3] Answer: SEVEN. This is the Caesar SHIFT KEY for Level 3." +
                    " Shift each letter BACK by 7. Example: C→V, P→I."),

            # L3 hard, caesar +7: victory
            _level("victory", 112, "CAESAR CIPHER",
                "CPJAVYF PZ AOL RLF AV ZBJJLZZ",
                "[HINT 1] Caesar Cipher. You know the shift from Level 2." +
                    " Shift every letter BACKWARD by that value.",
                "[HINT 2] Shift = 7. Decode: C→V  P→I  J→C  A→T  V→O  Y→R  F→Y",
                "[HINT 3] First decoded word = VICTORY (7 letters). Submit: victory-112")
        ),
        (
            # L1 easy, morse: alpha
            _level("alpha", 38, "MORSE CODE",
                ".- / .-.. / .--. / .... / .-",
                "[HINT 1] International Morse Code. Each group (/) = one letter.",
                "[HINT 2] .-=A  .-..=L  .--. =P  ....=H",
                "[HINT 3] 5 groups → 5 letters. The word is your team code-name."),

            # L2 medium, number pattern: seven
            _level("seven", 65, "NUMBER PATTERN",
                "19 -- 05 -- 22 -- 05 -- 14",
                "[HINT 1] Each number is a letter's position (A=1 … Z=26).",
                "[HINT 2] Map: 05=E  14=N  19=S  22=V",
                "[HINT 3] Answer: SEVEN — the Caesar shift key for Level 3." +
                    " Shift each Level-3 letter BACK by 7."),

            # L3 hard, number pattern: victory
            _level("victory", 112, "NUMBER PATTERN",
                "22 -- 09 -- 03 -- 20 -- 15 -- 18 -- 25",
                "[HINT 1] You used this method in Level 1. Each number = letter position.",
                "[HINT 2] Map: 03=C  09=I  15=O  18=R  20=T  22=V  25=Y",
                "[HINT 3] 7 numbers → VICTORY. Checksum = 22+9+3+20+15+18+25 = 112." +
                    " Submit: victory-112")
        )),

    # BETA: final keyword UNLOCK, checksum 76
    "BETA": PuzzleSet(
        (
            # L1 easy, number pattern: beta
            _level("beta", 28, "NUMBER PATTERN",
                "02 -- 05 -- 20 -- 01",
                "[HINT 1] Each number is a letter's position (A=1 … Z=26).",
                "[HINT 2] Map: 01=A  02=B  05=E  20=T",
                "[HINT 3] 4 numbers → 4 letters. The word is your team code-name."),

            # L2 medium, number pattern: morse
            _level("morse", 70, "NUMBER PATTERN",
                "13 -- 15 -- 18 -- 19 -- 05",
                "[HINT 1] Each number is a letter's position (A=1 … Z=26).",
                "[HINT 2] Map: 05=E  13=M  15=O  18=R  19=S",
                "[HINT 3] Answer: MORSE — the cipher TYPE used in Level 3." +
                    " In Morse each '/' group is one letter. Dot(.)=short Dash(-)=long."),

            # L3 hard, morse: unlock
            _level("unlock", 76, "MORSE CODE",
                "..- / -. / .-.. / --- / -.-. / -.-",
                "[HINT 1] Morse Code — you decoded the name of this cipher in Level 2.",
                "[HINT 2] ..-=U  -.=N  .-..=L  ---=O  -.-.=C  -.-=K",
                "[HINT 3] 6 groups → UNLOCK. Checksum=21+14+12+15+3+11=76. Submit: unlock-76")
        ),
        (
            # L1 easy, number pattern: beta
            _level("beta", 28, "NUMBER PATTERN",
                "02 -- 05 -- 20 -- 01",
                "[HINT 1] Each number is a letter's position (A=1 … Z=26).",
                "[HINT 2] Map: 01=A  02=B  05=E  20=T",
                "[HINT 3] 4 numbers → 4 letters. The word is your team code-name."),

            # L2 medium, anagram: morse
            _level("morse", 70, "ANAGRAM",
                "SCRAMBLED: M -- O -- E -- S -- R",
                "[HINT 1] Rearrange ALL 5 letters to form a word.",
                "[HINT 2] The word is the NAME of a famous signal code invented in the 1800s.",
                "[HINT 3] Answer: MORSE — the cipher type for Level 3." +
                    " Decode using dots and dashes."),

            # L3 hard, math sequence: unlock
            _level("unlock", 76, "MATH SEQUENCE",
                "[ 3x7 ] -> [ 7x2 ] -> [ 4x3 ] -> [ 5x3 ] -> [ 9/3 ] -> [ 11x1 ]",
                "[HINT 1] Solve each bracket. Each result is a number 1-26.",
                "[HINT 2] Convert result → letter (A=1 … Z=26). 3×7=21=U  7×2=14=N",
                "[HINT 3] 6 results → UNLOCK. Checksum=76. Submit: unlock-76")
        )),

    # GAMMA: final keyword FREEDOM, checksum 66
    "GAMMA": PuzzleSet(
        (
            # L1 easy, number pattern: gamma
            _level("gamma", 35, "NUMBER PATTERN",
                "07 -- 01 -- 13 -- 13 -- 01",
                "[HINT 1] Each number is a letter's position (A=1 … Z=26).",
                "[HINT 2] Map: 01=A  07=G  13=M",
                "[HINT 3] 5 numbers → 5 letters. The word is your team code-name."),

            # L2 medium, number pattern: order
            _level("order", 60, "NUMBER PATTERN",
                "15 -- 18 -- 04 -- 05 -- 18",
                "[HINT 1] Each number is a letter's position (A=1 … Z=26).",
                "[HINT 2] Map: 04=D  05=E  15=O  18=R",
                "[HINT 3] Answer: ORDER — the key skill for Level 3." +
                    " Level 3 is an ANAGRAM: rearrange ALL letters into correct ORDER."),

            # L3 hard, anagram: freedom
            _level("freedom", 66, "ANAGRAM",
                "SCRAMBLED: M -- O -- E -- R -- F -- D -- E",
                "[HINT 1] You decoded the word ORDER in Level 2. Now apply it here.",
                "[HINT 2] All 7 letters rearranged form a word about liberation." +
                    " It contains a repeated letter.",
                "[HINT 3] FREEDOM. Checksum=6+18+5+5+4+15+13=66. Submit: freedom-66")
        ),
        (
            # L1 easy, number pattern: gamma
            _level("gamma", 35, "NUMBER PATTERN",
                "07 -- 01 -- 13 -- 13 -- 01",
                "[HINT 1] Each number is a letter's position (A=1 … Z=26).",
                "[HINT 2] Map: 01=A  07=G  13=M",
                "[HINT 3] 5 numbers → 5 letters. The word is your team code-name."),

            # L2 medium, morse: order
            _level("order", 60, "MORSE CODE",
                "--- / .-. / -.. / . / .-.",
                "[HINT 1] International Morse Code. Each group = one letter.",
                "[HINT 2] ---=O  .-.=R  -..=D  .=E",
                "[HINT 3] Answer: ORDER. In Level 3 you must rearrange (ORDER) the" +
                    " scrambled letters to spell a 7-letter word about liberation."),

            # L3 hard, binary: freedom
            _level("freedom", 66, "BINARY DECODE",
                "00110 | 10010 | 00101 | 00101 | 00100 | 01111 | 01101",
                "[HINT 1] Each 5-bit group = one letter. Convert binary → decimal.",
                "[HINT 2] Decimal = letter position. 00110=6=F  10010=18=R  00101=5=E",
                "[HINT 3] 7 groups → FREEDOM. Checksum=66. Submit: freedom-66")
        )),

    # DELTA: final keyword CIPHER, checksum 59
    "DELTA": PuzzleSet(
        (
            # L1 easy, number pattern: delta
            _level("delta", 42, "NUMBER PATTERN",
                "04 -- 05 -- 12 -- 20 -- 01",
                "[HINT 1] Each number is a letter's position (A=1 … Z=26).",
                "[HINT 2] Map: 01=A  04=D  05=E  12=L  20=T",
                "[HINT 3] 5 numbers → 5 letters. The word is your team code-name."),

            # L2 medium, morse: grid
            _level("grid", 38, "MORSE CODE",
                "--. / .-. / .. / -..",
                "[HINT 1] International Morse Code. Each group = one letter.",
                "[HINT 2] --.=G  .-.=R  ..=I  -..=D",
                "[HINT 3] Answer: GRID — the tool for Level 3 is a 5×5 GRID (Polybius)." +
                    " Find (row,col) pairs in the grid to get each letter."),

            # L3 hard, polybius: cipher
            _level("cipher", 59, "POLYBIUS SQUARE",
                "   [1][2][3][4][5]\n" +
                    "1: [A][B][C][D][E]\n" +
                    "2: [F][G][H][I][K]\n" +
                    "3: [L][M][N][O][P]\n" +
                    "4: [Q][R][S][T][U]\n" +
                    "5: [V][W][X][Y][Z]\n" +
                    "SEQUENCE: (1,3)-(2,4)-(3,5)-(2,3)-(1,5)-(4,2)",
                "[HINT 1] You decoded GRID in Level 2. Now use the 5×5 GRID above.",
                "[HINT 2] Each (row,col) pair → one letter. (1,3)=C  (2,4)=I  (3,5)=P",
                "[HINT 3] 6 pairs → CIPHER. Checksum=3+9+16+8+5+18=59. Submit: cipher-59")
        ),
        (
            # L1 easy, number pattern: delta
            _level("delta", 42, "NUMBER PATTERN",
                "04 -- 05 -- 12 -- 20 -- 01",
                "[HINT 1] Each number is a letter's position (A=1 … Z=26).",
                "[HINT 2] Map: 01=A  04=D  05=E  12=L  20=T",
                "[HINT 3] 5 numbers → 5 letters. The word is your team code-name."),

            # L2 medium, number pattern: grid
            _level("grid", 38, "NUMBER PATTERN",
                "07 -- 18 -- 09 -- 04",
                "[HINT 1] Each number is a letter's position (A=1 … Z=26).",
                "[HINT 2] Map: 04=D  07=G  09=I  18=R",
                "[HINT 3] Answer: GRID. Level 3 uses a 5×5 grid (Polybius Square)." +
                    " Each (row,col) coordinate maps to one letter."),

            # L3 hard, logic gates: cipher
            _level("cipher", 59, "LOGIC GATE OUTPUT",
                "GATE-1: 0.0.0.1.1\n" +
                    "GATE-2: 0.1.0.0.1\n" +
                    "GATE-3: 1.0.0.0.0\n" +
                    "GATE-4: 0.1.0.0.0\n" +
                    "GATE-5: 0.0.1.0.1\n" +
                    "GATE-6: 1.0.0.1.0\n" +
                    "[KEY: A=00001  Z=11010  dots separate bits]",
                "[HINT 1] Each GATE row = 5-bit binary. Ignore dots.",
                "[HINT 2] Convert binary → decimal = letter position (A=1 … Z=26)." +
                    " GATE-1: 00011=3=C  GATE-2: 01001=9=I",
                "[HINT 3] 6 gates → CIPHER. Checksum=59. Submit: cipher-59")
        )),

    # SIGMA: final keyword SIGNAL, checksum 62
    "SIGMA": PuzzleSet(
        (
            # L1 easy, number pattern: sigma
            _level("sigma", 49, "NUMBER PATTERN",
                "19 -- 09 -- 07 -- 13 -- 01",
                "[HINT 1] Each number is a letter's position (A=1 … Z=26).",
                "[HINT 2] Map: 01=A  07=G  09=I  13=M  19=S",
                "[HINT 3] 5 numbers → 5 letters. The word is your team code-name."),

            # L2 medium, morse: binary
            _level("binary", 69, "MORSE CODE",
                "-... / .. / -. / .- / .-. / -.--",
                "[HINT 1] International Morse Code. Each group = one letter.",
                "[HINT 2] -...=B  ..=I  -.=N  .-=A  .-.=R  -.--=Y",
                "[HINT 3] Answer: BINARY — the encoding method in Level 3." +
                    " Convert each 5-bit binary group to decimal, then to a letter."),

            # L3 hard, binary: signal
            _level("signal", 62, "BINARY DECODE",
                "10011 | 01001 | 00111 | 01110 | 00001 | 01100",
                "[HINT 1] You decoded BINARY in Level 2. Now use that method here.",
                "[HINT 2] Convert each 5-bit group: 10011=19=S  01001=9=I  00111=7=G",
                "[HINT 3] 6 groups → SIGNAL. Checksum=19+9+7+14+1+12=62. Submit: signal-62")
        ),
        (
            # L1 easy, number pattern: sigma
            _level("sigma", 49, "NUMBER PATTERN",
                "19 -- 09 -- 07 -- 13 -- 01",
                "[HINT 1] Each number is a letter's position (A=1 … Z=26).",
                "[HINT 2] Map: 01=A  07=G  09=I  13=M  19=S",
                "[HINT 3] 5 numbers → 5 letters. The word is your team code-name."),

            # L2 medium, number pattern: binary
            _level("binary", 69, "NUMBER PATTERN",
                "02 -- 09 -- 14 -- 01 -- 18 -- 25",
                "[HINT 1] Each number is a letter's position (A=1 … Z=26).",
                "[HINT 2] Map: 01=A  02=B  09=I  14=N  18=R  25=Y",
                "[HINT 3] Answer: BINARY — Level 3 uses Morse Code (dots & dashes)." +
                    " ...=S  ..=I  --.=G  -.=N  .-=A  .-..=L"),

            # L3 hard, morse: signal
            _level("signal", 62, "MORSE CODE",
                "... .. --. -. .- .-..",
                "[HINT 1] Morse Code — spaces separate letters.",
                "[HINT 2] ...=S  ..=I  --.=G  -.=N  .-=A  .-..=L",
                "[HINT 3] 6 groups → SIGNAL. Checksum=62. Submit: signal-62")
        )),

    # THETA: final keyword PHOENIX, checksum 91
    "THETA": PuzzleSet(
        (
            _level("theta", 54, "NUMBER PATTERN",
                "20 -- 08 -- 05 -- 20 -- 01",
                "[HINT 1] Each number is a letter's position (A=1 … Z=26).",
                "[HINT 2] Map: 01=A  05=E  08=H  20=T",
                "[HINT 3] 5 numbers → 5 letters. Your team code-name."),
            _level("bird", 33, "MORSE CODE",
                "-... / .. / .-. / -..",
                "[HINT 1] Morse Code. Each group = one letter.",
                "[HINT 2] -...=B  ..=I  .-.=R  -..=D",
                "[HINT 3] Answer: BIRD. Level 3 is an ANAGRAM of a mythical BIRD name." +
                    " Letters: N,X,O,P,H,I,E — rearrange to name the fiery bird."),
            _level("phoenix", 91, "ANAGRAM",
                "SCRAMBLED: N -- X -- O -- P -- H -- I -- E",
                "[HINT 1] Level 2 told you the answer is a mythical BIRD name.",
                "[HINT 2] 7 letters. The bird is reborn from ashes. Starts with P.",
                "[HINT 3] PHOENIX. Checksum=16+8+15+5+14+9+24=91. Submit: phoenix-91")
        ),
        (
            _level("theta", 54, "NUMBER PATTERN",
                "20 -- 08 -- 05 -- 20 -- 01",
                "[HINT 1] Each number is a letter's position (A=1 … Z=26).",
                "[HINT 2] Map: 01=A  05=E  08=H  20=T",
                "[HINT 3] 5 numbers → 5 letters. Your team code-name."),
            _level("bird", 33, "NUMBER PATTERN",
                "02 -- 09 -- 18 -- 04",
                "[HINT 1] Each number is a letter's position (A=1 … Z=26).",
                "[HINT 2] Map: 02=B  04=D  09=I  18=R",
                "[HINT 3] Answer: BIRD. Level 3 maps numbers directly to PHOENIX letters." +
                    " P=16 H=8 O=15 E=5 N=14 I=9 X=24"),
            _level("phoenix", 91, "NUMBER PATTERN",
                "16 -- 08 -- 15 -- 05 -- 14 -- 09 -- 24",
                "[HINT 1] Level 2 said BIRD — now decode the bird's name from numbers.",
                "[HINT 2] Map: 05=E  08=H  09=I  14=N  15=O  16=P  24=X",
                "[HINT 3] 7 numbers → PHOENIX. Checksum=91. Submit: phoenix-91")
        )),

    # KAPPA: final keyword QUANTUM, checksum 107
    "KAPPA": PuzzleSet(
        (
            _level("kappa", 45, "NUMBER PATTERN",
                "11 -- 01 -- 16 -- 16 -- 01",
                "[HINT 1] Each number is a letter's position (A=1 … Z=26).",
                "[HINT 2] Map: 01=A  11=K  16=P",
                "[HINT 3] 5 numbers → 5 letters. Your team code-name."),
            _level("five", 42, "ANAGRAM",
                "SCRAMBLED: I -- V -- E -- F",
                "[HINT 1] Rearrange ALL 4 letters to form a number word.",
                "[HINT 2] The number is less than ten. It has an F.",
                "[HINT 3] Answer: FIVE — the Caesar shift value for Level 3." +
                    " Shift each cipher letter BACKWARD by 5. V→Q  Z→U  F→A."),
            _level("quantum", 107, "CAESAR CIPHER",
                "VZFSYZR NX YMJ PJD YT UTBJW",
                "[HINT 1] Caesar Cipher. Level 2 gave you the shift value.",
                "[HINT 2] Shift = 5. Decode: V→Q  Z→U  F→A  S→N  Y→T  R→M",
                "[HINT 3] First word = QUANTUM. Checksum=107. Submit: quantum-107")
        ),
        (
            _level("kappa", 45, "NUMBER PATTERN",
                "11 -- 01 -- 16 -- 16 -- 01",
                "[HINT 1] Each number is a letter's position (A=1 … Z=26).",
                "[HINT 2] Map: 01=A  11=K  16=P",
                "[HINT 3] 5 numbers → 5 letters. Your team code-name."),
            _level("five", 42, "NUMBER PATTERN",
                "06 -- 09 -- 22 -- 05",
                "[HINT 1] Each number is a letter's position (A=1 … Z=26).",
                "[HINT 2] Map: 05=E  06=F  09=I  22=V",
                "[HINT 3] Answer: FIVE — each Level-3 binary group decodes to a number." +
                    " Q=17=10001  U=21=10101  A=1=00001  N=14=01110  T=20=10100"),
            _level("quantum", 107, "BINARY DECODE",
                "10001 | 10101 | 00001 | 01110 | 10100 | 10101 | 01101",
                "[HINT 1] Binary decode. Level 2 hinted the letter positions.",
                "[HINT 2] 10001=17=Q  10101=21=U  00001=1=A  01110=14=N",
                "[HINT 3] 7 groups → QUANTUM. Checksum=107. Submit: quantum-107")
        )),

    # LAMBDA: final keyword VORTEX, checksum 104
    "LAMBDA": PuzzleSet(
        (
            _level("lambda", 33, "NUMBER PATTERN",
                "12 -- 01 -- 13 -- 02 -- 04 -- 01",
                "[HINT 1] Each number is a letter's position (A=1 … Z=26).",
                "[HINT 2] Map: 01=A  02=B  04=D  12=L  13=M",
                "[HINT 3] 6 numbers → 6 letters. Your team code-name."),
            _level("code", 27, "NUMBER PATTERN",
                "03 -- 15 -- 04 -- 05",
                "[HINT 1] Each number is a letter's position (A=1 … Z=26).",
                "[HINT 2] Map: 03=C  04=D  05=E  15=O",
                "[HINT 3] Answer: CODE — Level 3 is MORSE CODE." +
                    " ...-=V  ---=O  .-.=R  -=T  .=E  -..=X"),
            _level("vortex", 104, "MORSE CODE",
                "...- / --- / .-. / - / . / -..-",
                "[HINT 1] Morse Code. Level 2 told you this cipher's name.",
                "[HINT 2] ...-=V  ---=O  .-.=R  -=T  .=E  -..=X",
                "[HINT 3] 6 groups → VORTEX. Checksum=22+15+18+20+5+24=104. Submit: vortex-104")
        ),
        (
            _level("lambda", 33, "NUMBER PATTERN",
                "12 -- 01 -- 13 -- 02 -- 04 -- 01",
                "[HINT 1] Each number is a letter's position (A=1 … Z=26).",
                "[HINT 2] Map: 01=A  02=B  04=D  12=L  13=M",
                "[HINT 3] 6 numbers → 6 letters. Your team code-name."),
            _level("code", 27, "ANAGRAM",
                "SCRAMBLED: O -- D -- C -- E",
                "[HINT 1] Rearrange ALL 4 letters to form a common word.",
                "[HINT 2] The word means a system of rules or a cipher system.",
                "[HINT 3] Answer: CODE — Level 3 is a Polybius Square." +
                    " (5,1)=V  (3,4)=O  (4,2)=R  (4,4)=T  (1,5)=E  (5,3)=X"),
            _level("vortex", 104, "POLYBIUS SQUARE",
                "   [1][2][3][4][5]\n" +
                    "1: [A][B][C][D][E]\n" +
                    "2: [F][G][H][I][K]\n" +
                    "3: [L][M][N][O][P]\n" +
                    "4: [Q][R][S][T][U]\n" +
                    "5: [V][W][X][Y][Z]\n" +
                    "SEQUENCE: (5,1)-(3,4)-(4,2)-(4,4)-(1,5)-(5,3)",
                "[HINT 1] Use the 5×5 grid. Each (row,col) → one letter.",
                "[HINT 2] (5,1)=V  (3,4)=O  (4,2)=R  (4,4)=T  (1,5)=E  (5,3)=X",
                "[HINT 3] 6 pairs → VORTEX. Checksum=104. Submit: vortex-104")
        )),

    # MU: final keyword ZENITH, checksum 82
    "MU": PuzzleSet(
        (
            _level("north", 75, "NUMBER PATTERN",
                "14 -- 15 -- 18 -- 20 -- 08",
                "[HINT 1] Each number is a letter's position (A=1 … Z=26).",
                "[HINT 2] Map: 08=H  14=N  15=O  18=R  20=T",
                "[HINT 3] 5 numbers → 5 letters. A direction word. Submit lowercase."),
            _level("math", 42, "MORSE CODE",
                "-- / .- / - / ....",
                "[HINT 1] Morse Code. Each group = one letter.",
                "[HINT 2] --=M  .-=A  -=T  ....=H",
                "[HINT 3] Answer: MATH — Level 3 uses MATH expressions." +
                    " Solve each bracket, convert result to letter (A=1 … Z=26)."),
            _level("zenith", 82, "MATH SEQUENCE",
                "[ 13x2 ] -> [ 15-10 ] -> [ 7x2 ] -> [ 3x3 ] -> [ 4x5 ] -> [ 2x4 ]",
                "[HINT 1] Solve each bracket. Result = letter position (A=1 … Z=26).",
                "[HINT 2] 13x2=26=Z  15-10=5=E  7x2=14=N  3x3=9=I",
                "[HINT 3] 6 results → ZENITH. Checksum=26+5+14+9+20+8=82. Submit: zenith-82")
        ),
        (
            _level("north", 75, "NUMBER PATTERN",
                "14 -- 15 -- 18 -- 20 -- 08",
                "[HINT 1] Each number is a letter's position (A=1 … Z=26).",
                "[HINT 2] Map: 08=H  14=N  15=O  18=R  20=T",
                "[HINT 3] 5 numbers → 5 letters. A direction word. Submit lowercase."),
            _level("math", 42, "NUMBER PATTERN",
                "13 -- 01 -- 20 -- 08",
                "[HINT 1] Each number is a letter's position (A=1 … Z=26).",
                "[HINT 2] Map: 01=A  08=H  13=M  20=T",
                "[HINT 3] Answer: MATH. Level 3 uses math: 13×2=26=Z  15-10=5=E  7×2=14=N" +
                    "  3×3=9=I  4×5=20=T  2×4=8=H → ZENITH"),
            _level("zenith", 82, "MATH SEQUENCE",
                "[ 13x2 ] -> [ 15-10 ] -> [ 7x2 ] -> [ 3x3 ] -> [ 4x5 ] -> [ 2x4 ]",
                "[HINT 1] Solve each bracket. Result = letter position (A=1 … Z=26).",
                "[HINT 2] 13x2=26=Z  15-10=5=E  7x2=14=N  3x3=9=I",
                "[HINT 3] 6 results → ZENITH. Checksum=82. Submit: zenith-82")
        )),

    # NU: final keyword ENIGMA, checksum 49
    "NU": PuzzleSet(
        (
            _level("shadow", 70, "NUMBER PATTERN",
                "19 -- 08 -- 01 -- 04 -- 15 -- 23",
                "[HINT 1] Each number is a letter's position (A=1 … Z=26).",
                "[HINT 2] Map: 01=A  04=D  08=H  15=O  19=S  23=W",
                "[HINT 3] 6 numbers → 6 letters. A word meaning mystery or darkness."),
            _level("three", 56, "ANAGRAM",
                "SCRAMBLED: T -- R -- H -- E -- E",
                "[HINT 1] Rearrange ALL 5 letters to form a number word.",
                "[HINT 2] The number is less than five. It contains two E's.",
                "[HINT 3] Answer: THREE — the Caesar shift for Level 3." +
                    " Shift each cipher letter BACK by 3. H→E  Q→N  L→I."),
            _level("enigma", 49, "CAESAR CIPHER",
                "HQLJPD LV WKH KLGGHQ PBVWHUB",
                "[HINT 1] Caesar Cipher. Level 2 gave you the shift value.",
                "[HINT 2] Shift = 3. Decode: H→E  Q→N  L→I  J→G  P→M  D→A",
                "[HINT 3] First word = ENIGMA. Checksum=5+14+9+7+13+1=49. Submit: enigma-49")
        ),
        (
            _level("shadow", 70, "NUMBER PATTERN",
                "19 -- 08 -- 01 -- 04 -- 15 -- 23",
                "[HINT 1] Each number is a letter's position (A=1 … Z=26).",
                "[HINT 2] Map: 01=A  04=D  08=H  15=O  19=S  23=W",
                "[HINT 3] 6 numbers → 6 letters. A word meaning mystery or darkness."),
            _level("three", 56, "MORSE CODE",
                "- / .... / .-. / . / .",
                "[HINT 1] Morse Code. Each group = one letter.",
                "[HINT 2] -=T  ....=H  .-.=R  .=E",
                "[HINT 3] Answer: THREE — the shift key for Level 3 Caesar cipher." +
                    " Decode: H-3=E  Q-3=N  L-3=I  J-3=G  P-3=M  D-3=A"),
            _level("enigma", 49, "BINARY DECODE",
                "00101 | 01110 | 01001 | 00111 | 01101 | 00001",
                "[HINT 1] Binary decode. Each 5-bit group → decimal → letter.",
                "[HINT 2] 00101=5=E  01110=14=N  01001=9=I  00111=7=G",
                "[HINT 3] 6 groups → ENIGMA. Checksum=49. Submit: enigma-49")
        )),
}
