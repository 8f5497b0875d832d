"""
mailc contexts: parsing (templates -> ParsedTemplate) and generation (ParsedTemplate -> modules).
"""
