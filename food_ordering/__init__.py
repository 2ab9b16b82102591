"""
food_ordering
Campus food ordering: accounts, menu catalog, cart and orders.
"""
