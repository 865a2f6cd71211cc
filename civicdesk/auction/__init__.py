"""Art auction items, offers, users and bidding."""