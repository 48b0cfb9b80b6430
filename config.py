# Configuration for the stock report command-line script

# Body type assumed when the file extension does not tell
DEFAULT_CONTENT_TYPE = "html"

# File extensions read as HTML bodies; anything else is read as plain text
HTML_EXTENSIONS = [".html", ".htm"]

# Input file encoding
INPUT_ENCODING = "utf-8"

# How many customers to print in the summary
TOP_CUSTOMERS = 5

# Output directory
OUTPUT_DIR = "output"
