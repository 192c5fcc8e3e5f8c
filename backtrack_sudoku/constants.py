# constants.py

SUBDIMENSION = 3  # block width and height
MIN_NUM = 1
MAX_NUM = 9
TOTAL_NUMS = MAX_NUM - MIN_NUM + 1
TOTAL_CELLS = TOTAL_NUMS * TOTAL_NUMS
