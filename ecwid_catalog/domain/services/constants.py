
# Collection paths, relative to the store base URL
PRODUCTS_PATH = "/products"
CATEGORIES_PATH = "/categories"

# Pagination query keys
FILTER_OFFSET = "offset"
FILTER_LIMIT = "limit"
