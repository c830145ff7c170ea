"""TFR pilot file constants, sentinels, and magic numbers."""

# A pilot file is always this long. New pilots that never entered the lobby are all zeros.
TFR_SIZE = 3855

# Training certificates: 3 missions per craft, value 4 means all completed
CERT_DEFAULT = 0x02
CERT_COMPLETED = 0x04

# Simulator medals: 4 missions per craft, one counter byte each
SIM_MISSIONS = 4
SIM_STRIDE = 8          # each craft block reserves 8 bytes, only 4 are used

# Battle status codes (offset 617+)
BATTLE_ACTIVE = 0x01
BATTLE_CAPTURED = 0x02
BATTLE_COMPLETED = 0x03
BATTLE_KILLED = 0x04

# Pilot status (offset 0, repeated at 1628)
PILOT_ALIVE = 0x00
PILOT_CAPTURED = 0x01
PILOT_KILLED = 0x02

# Table sizes
TRAINABLE_CRAFT_COUNT = 7
UNUSED_CERT_COUNT = 5
BATTLE_COUNT = 13
KILL_SLOTS = 68
TRAINING_SLOTS = 28     # 7 craft x 4 missions
MISSIONS_PER_BATTLE = 8
BATTLE_POINT_SLOTS = BATTLE_COUNT * MISSIONS_PER_BATTLE
