"""Normalization package.

Author names appear in free text in the reports and in structured form in
the curator list.  Both sides are reduced to the same canonical key here
so that they can be matched by plain equality.
"""
