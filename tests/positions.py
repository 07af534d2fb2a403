"""FEN positions shared by the test modules."""

# White queen on d4 can take a pawn on d6 (defended by e7) or an
# undefended queen on a7.
QUEEN_TRADE = "6k1/q3p3/3p4/8/3Q4/8/7K/8 w - - 0 1"

# Rd8 is mate on the back rank; Nxh5 wins a queen.
BACK_RANK = "6k1/5ppp/8/7q/5N2/8/8/3R2K1 w - - 0 1"

# Both sides may castle either way.
CASTLING = "r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1"

# Black pawn on d4 covers c3 and e3.
KNIGHT_DEVELOPMENT = "4k3/8/8/8/3p4/8/8/1N2K3 w - - 0 1"

# exd6 en passant is available.
EN_PASSANT = "4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 2"

# Ra8+ checks without mating.
LONE_ROOK = "4k3/8/8/8/8/8/8/R3K3 w - - 0 1"

# White king on e1 in check from the rook on e2.
IN_CHECK = "4k3/8/8/8/8/8/4r3/4K3 w - - 0 1"

# Black to move, no legal moves.
STALEMATE = "7k/5Q2/6K1/8/8/8/8/8 b - - 0 1"
