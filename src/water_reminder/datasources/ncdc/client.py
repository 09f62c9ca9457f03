"""NOAA NCDC Climate Data Online (CDO) v2 client constants.

API docs: https://www.ncdc.noaa.gov/cdo-web/webservices/v2
"""

CDO_API = "https://www.ncdc.noaa.gov/cdo-web/api/v2"
CDO_DATA_ENDPOINT = f"{CDO_API}/data"

DATASET_ID = "GHCND"  # Global Historical Climatology Network - Daily
PRECIP_DATATYPE_ID = "PRCP"
UNITS = "standard"  # inches

# CDO caps ``limit`` at 1000; offsets are 1-based
PAGE_SIZE = 1000
FIRST_OFFSET = 1
