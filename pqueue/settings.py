QUEUE_SETTINGS = {
    'STRICT': False, # raise instead of returning sentinels / silently ignoring calls
    'LOWEST_DUPLICATE_PRIORITY': False, # get_priority returns min over duplicates instead of first match
    'INITIAL_CAPACITY': 16,
}

PRINTING_SETTINGS = {
    'DEFAULT': True,
    'BENCHMARK': True,
    'DEBUG': False,
}
