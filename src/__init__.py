"""CL/P world map statistics: spreadsheet conversion and choropleth export."""
