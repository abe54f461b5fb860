"""Hotels app package.

This app holds the hotel and room catalog together with the owner-managed
room calendar: blocked periods, seasonal nightly rates, price resolution
and the monthly availability view.
"""
