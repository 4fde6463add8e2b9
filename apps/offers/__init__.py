"""Offers app package.

An offer is an item a lessor puts up for rent. This app owns the offer
record with its running rating aggregate and the availability calendar:
the blocked date intervals declared by the lessor or created when a
booking is accepted.
"""
