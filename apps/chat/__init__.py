"""Chat app package.

Only the system messages the booking flow drops into the conversation
between lessee and lessor live here; the interactive chat protocol is
served elsewhere.
"""
