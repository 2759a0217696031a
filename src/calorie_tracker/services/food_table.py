"""Built-in nutrition facts for common foods.

Values are per standard serving and come from USDA FoodData Central
reference data. Key order is the iteration order used by fuzzy matching.
"""

from types import MappingProxyType

from calorie_tracker.domain.nutrition import StaticEntry

STATIC_SOURCE = "USDA FoodData Central (Cached)"

_FOODS: dict[str, StaticEntry] = {
    # Fruits
    "apple": StaticEntry(
        calories=95,
        protein=0,
        carbs=25,
        fat=0,
        explanation="Medium apple (182g). Based on USDA standard reference data.",
    ),
    "banana": StaticEntry(
        calories=105,
        protein=1,
        carbs=27,
        fat=0,
        explanation="Medium banana (118g). Based on USDA standard reference data.",
    ),
    "orange": StaticEntry(
        calories=62,
        protein=1,
        carbs=15,
        fat=0,
        explanation="Medium orange (131g). Based on USDA standard reference data.",
    ),
    "grapes": StaticEntry(
        calories=104,
        protein=1,
        carbs=27,
        fat=0,
        explanation="1 cup of grapes (151g). Based on USDA standard reference data.",
    ),
    "strawberries": StaticEntry(
        calories=49,
        protein=1,
        carbs=12,
        fat=0,
        explanation=(
            "1 cup of strawberries (152g). Based on USDA standard reference data."
        ),
    ),
    "watermelon": StaticEntry(
        calories=46,
        protein=1,
        carbs=11,
        fat=0,
        explanation=(
            "1 cup diced watermelon (152g). Based on USDA standard reference data."
        ),
    ),

    # Fast Food / Common Meals
    "burger": StaticEntry(
        calories=540,
        protein=25,
        carbs=40,
        fat=25,
        explanation=(
            "Standard fast food hamburger with cheese (150g). Includes bun, beef "
            "patty, cheese, lettuce, tomato."
        ),
    ),
    "cheeseburger": StaticEntry(
        calories=563,
        protein=28,
        carbs=38,
        fat=33,
        explanation=(
            "Standard cheeseburger (155g). Based on USDA fast food composite data."
        ),
    ),
    "pizza": StaticEntry(
        calories=285,
        protein=12,
        carbs=36,
        fat=10,
        explanation=(
            "One slice of cheese pizza (107g). Based on typical pizza chain data."
        ),
    ),
    "fries": StaticEntry(
        calories=365,
        protein=4,
        carbs=48,
        fat=17,
        explanation="Medium french fries (117g). Based on USDA fast food data.",
    ),
    "french fries": StaticEntry(
        calories=365,
        protein=4,
        carbs=48,
        fat=17,
        explanation="Medium french fries (117g). Based on USDA fast food data.",
    ),
    "hot dog": StaticEntry(
        calories=290,
        protein=10,
        carbs=24,
        fat=17,
        explanation="Hot dog with bun (98g). Based on USDA standard reference.",
    ),
    "sandwich": StaticEntry(
        calories=350,
        protein=15,
        carbs=42,
        fat=12,
        explanation=(
            "Basic deli sandwich (150g). Turkey/ham with cheese, lettuce, tomato on "
            "bread."
        ),
    ),
    "taco": StaticEntry(
        calories=210,
        protein=9,
        carbs=13,
        fat=13,
        explanation="One crunchy beef taco (78g). Based on USDA fast food data.",
    ),

    # Protein Foods
    "chicken breast": StaticEntry(
        calories=165,
        protein=31,
        carbs=0,
        fat=4,
        explanation=(
            "100g cooked chicken breast (skinless). Based on USDA standard reference."
        ),
    ),
    "salmon": StaticEntry(
        calories=206,
        protein=22,
        carbs=0,
        fat=12,
        explanation="100g cooked Atlantic salmon. Based on USDA standard reference.",
    ),
    "steak": StaticEntry(
        calories=271,
        protein=26,
        carbs=0,
        fat=18,
        explanation="100g beef steak, cooked. Based on USDA standard reference.",
    ),
    "eggs": StaticEntry(
        calories=155,
        protein=13,
        carbs=1,
        fat=11,
        explanation="Two large eggs (100g). Based on USDA standard reference.",
    ),
    "egg": StaticEntry(
        calories=78,
        protein=6,
        carbs=1,
        fat=5,
        explanation="One large egg (50g). Based on USDA standard reference.",
    ),

    # Grains & Carbs
    "rice": StaticEntry(
        calories=206,
        protein=4,
        carbs=45,
        fat=2,
        explanation="1 cup cooked white rice (158g). Based on USDA standard reference.",
    ),
    "pasta": StaticEntry(
        calories=220,
        protein=8,
        carbs=43,
        fat=1,
        explanation="1 cup cooked pasta (140g). Based on USDA standard reference.",
    ),
    "bread": StaticEntry(
        calories=79,
        protein=4,
        carbs=15,
        fat=1,
        explanation=(
            "One slice of whole wheat bread (28g). Based on USDA standard reference."
        ),
    ),
    "toast": StaticEntry(
        calories=79,
        protein=4,
        carbs=15,
        fat=1,
        explanation=(
            "One slice of toasted whole wheat bread (28g). Based on USDA standard "
            "reference."
        ),
    ),
    "oatmeal": StaticEntry(
        calories=158,
        protein=6,
        carbs=28,
        fat=3,
        explanation="1 cup cooked oatmeal (234g). Based on USDA standard reference.",
    ),

    # Vegetables
    "broccoli": StaticEntry(
        calories=55,
        protein=4,
        carbs=11,
        fat=1,
        explanation="1 cup chopped broccoli (156g). Based on USDA standard reference.",
    ),
    "carrots": StaticEntry(
        calories=52,
        protein=1,
        carbs=12,
        fat=0,
        explanation="1 cup chopped carrots (128g). Based on USDA standard reference.",
    ),
    "salad": StaticEntry(
        calories=33,
        protein=3,
        carbs=6,
        fat=0,
        explanation=(
            "1 cup mixed green salad (55g), no dressing. Based on USDA standard "
            "reference."
        ),
    ),
    "lettuce": StaticEntry(
        calories=5,
        protein=0,
        carbs=1,
        fat=0,
        explanation="1 cup shredded lettuce (47g). Based on USDA standard reference.",
    ),

    # Dairy
    "milk": StaticEntry(
        calories=149,
        protein=8,
        carbs=12,
        fat=8,
        explanation="1 cup whole milk (244g). Based on USDA standard reference.",
    ),
    "yogurt": StaticEntry(
        calories=149,
        protein=8,
        carbs=11,
        fat=8,
        explanation=(
            "1 cup plain whole milk yogurt (245g). Based on USDA standard reference."
        ),
    ),
    "cheese": StaticEntry(
        calories=114,
        protein=7,
        carbs=1,
        fat=9,
        explanation="1 oz cheddar cheese (28g). Based on USDA standard reference.",
    ),

    # Beverages
    "water": StaticEntry(
        calories=0,
        protein=0,
        carbs=0,
        fat=0,
        explanation="Water contains no calories. Hydration is important for health!",
    ),
    "coffee": StaticEntry(
        calories=2,
        protein=0,
        carbs=0,
        fat=0,
        explanation="Black coffee (240ml). Add calories for milk/sugar.",
    ),
    "tea": StaticEntry(
        calories=2,
        protein=0,
        carbs=0,
        fat=0,
        explanation="Plain tea (240ml). Add calories for milk/sugar.",
    ),
    "soda": StaticEntry(
        calories=140,
        protein=0,
        carbs=39,
        fat=0,
        explanation="12 oz can of cola (355ml). Based on typical soda nutrition data.",
    ),
    "juice": StaticEntry(
        calories=112,
        protein=2,
        carbs=26,
        fat=0,
        explanation="1 cup orange juice (248g). Based on USDA standard reference.",
    ),

    # Snacks
    "chips": StaticEntry(
        calories=152,
        protein=2,
        carbs=15,
        fat=10,
        explanation="1 oz potato chips (28g). Based on USDA standard reference.",
    ),
    "popcorn": StaticEntry(
        calories=31,
        protein=1,
        carbs=6,
        fat=0,
        explanation="1 cup air-popped popcorn (8g). Based on USDA standard reference.",
    ),
    "nuts": StaticEntry(
        calories=165,
        protein=6,
        carbs=6,
        fat=14,
        explanation="1 oz mixed nuts (28g). Based on USDA standard reference.",
    ),
    "almonds": StaticEntry(
        calories=164,
        protein=6,
        carbs=6,
        fat=14,
        explanation=(
            "1 oz almonds (28g, ~23 almonds). Based on USDA standard reference."
        ),
    ),
    "peanuts": StaticEntry(
        calories=161,
        protein=7,
        carbs=5,
        fat=14,
        explanation="1 oz peanuts (28g). Based on USDA standard reference.",
    ),
    "chocolate": StaticEntry(
        calories=235,
        protein=3,
        carbs=26,
        fat=13,
        explanation=(
            "1.5 oz milk chocolate bar (43g). Based on USDA standard reference."
        ),
    ),
    "cookie": StaticEntry(
        calories=49,
        protein=1,
        carbs=7,
        fat=2,
        explanation=(
            "One chocolate chip cookie (12g). Based on USDA standard reference."
        ),
    ),
    "ice cream": StaticEntry(
        calories=207,
        protein=4,
        carbs=24,
        fat=11,
        explanation=(
            "1/2 cup vanilla ice cream (66g). Based on USDA standard reference."
        ),
    ),

    # Breakfast Foods
    "cereal": StaticEntry(
        calories=147,
        protein=3,
        carbs=33,
        fat=1,
        explanation=(
            "1 cup corn flakes (28g) with no milk. Based on USDA standard reference."
        ),
    ),
    "pancakes": StaticEntry(
        calories=227,
        protein=6,
        carbs=28,
        fat=10,
        explanation="Two 4-inch pancakes (76g). Based on USDA standard reference.",
    ),
    "waffle": StaticEntry(
        calories=218,
        protein=6,
        carbs=25,
        fat=11,
        explanation="One 7-inch waffle (75g). Based on USDA standard reference.",
    ),
    "bacon": StaticEntry(
        calories=43,
        protein=3,
        carbs=0,
        fat=3,
        explanation="One slice of cooked bacon (8g). Based on USDA standard reference.",
    ),

    # Composite/Fast Food Meals
    "grilled cheese": StaticEntry(
        calories=420,
        protein=18,
        carbs=38,
        fat=22,
        explanation=(
            "Grilled cheese sandwich with 2 slices bread and 2 oz cheese. Based on "
            "USDA composite data."
        ),
    ),
    "milkshake": StaticEntry(
        calories=350,
        protein=9,
        carbs=56,
        fat=11,
        explanation="12 oz vanilla milkshake. Based on typical fast food data.",
    ),
    "shake": StaticEntry(
        calories=350,
        protein=9,
        carbs=56,
        fat=11,
        explanation="12 oz vanilla shake. Based on typical fast food data.",
    ),
    "chicken nuggets": StaticEntry(
        calories=280,
        protein=13,
        carbs=18,
        fat=17,
        explanation=(
            "6-piece chicken nuggets (100g). Based on fast food composite data."
        ),
    ),
    "chicken sandwich": StaticEntry(
        calories=440,
        protein=28,
        carbs=41,
        fat=16,
        explanation=(
            "Fried chicken sandwich with bun, lettuce, mayo. Based on fast food data."
        ),
    ),
    "fish sandwich": StaticEntry(
        calories=390,
        protein=16,
        carbs=39,
        fat=19,
        explanation="Fried fish sandwich with tartar sauce. Based on fast food data.",
    ),
    "sub sandwich": StaticEntry(
        calories=410,
        protein=22,
        carbs=47,
        fat=13,
        explanation=(
            "6-inch sub with deli meat, cheese, veggies. Based on typical sub shop "
            "data."
        ),
    ),
    "burrito": StaticEntry(
        calories=510,
        protein=20,
        carbs=66,
        fat=17,
        explanation=(
            "Chicken burrito with rice, beans, cheese, salsa (250g). Based on fast "
            "food data."
        ),
    ),
    "quesadilla": StaticEntry(
        calories=490,
        protein=19,
        carbs=39,
        fat=28,
        explanation=(
            "Cheese quesadilla with sour cream (200g). Based on restaurant data."
        ),
    ),
    "nachos": StaticEntry(
        calories=560,
        protein=15,
        carbs=56,
        fat=30,
        explanation=(
            "Nachos with cheese, meat, sour cream (250g). Based on restaurant data."
        ),
    ),

    # More Breakfast Items
    "muffin": StaticEntry(
        calories=426,
        protein=7,
        carbs=61,
        fat=17,
        explanation="One large blueberry muffin (110g). Based on USDA data.",
    ),
    "bagel": StaticEntry(
        calories=277,
        protein=11,
        carbs=55,
        fat=2,
        explanation="One plain bagel (95g). Based on USDA standard reference.",
    ),
    "croissant": StaticEntry(
        calories=231,
        protein=5,
        carbs=26,
        fat=12,
        explanation="One medium croissant (57g). Based on USDA data.",
    ),
    "donut": StaticEntry(
        calories=269,
        protein=3,
        carbs=31,
        fat=15,
        explanation="One glazed donut (60g). Based on USDA data.",
    ),
    "french toast": StaticEntry(
        calories=340,
        protein=10,
        carbs=42,
        fat=14,
        explanation="Two slices of french toast with syrup (130g). Based on USDA data.",
    ),
    "scrambled eggs": StaticEntry(
        calories=204,
        protein=14,
        carbs=4,
        fat=15,
        explanation="Two scrambled eggs with butter (140g). Based on USDA data.",
    ),
    "omelette": StaticEntry(
        calories=280,
        protein=18,
        carbs=4,
        fat=21,
        explanation="Three-egg cheese omelette (180g). Based on USDA data.",
    ),
    "sausage": StaticEntry(
        calories=286,
        protein=15,
        carbs=1,
        fat=24,
        explanation="Two breakfast sausage links (85g). Based on USDA data.",
    ),
    "hash browns": StaticEntry(
        calories=265,
        protein=3,
        carbs=35,
        fat=13,
        explanation="One serving hash browns (120g). Based on fast food data.",
    ),

    # More Beverages
    "smoothie": StaticEntry(
        calories=215,
        protein=4,
        carbs=50,
        fat=1,
        explanation=(
            "16 oz fruit smoothie (450ml). Based on typical smoothie shop data."
        ),
    ),
    "protein shake": StaticEntry(
        calories=220,
        protein=20,
        carbs=25,
        fat=3,
        explanation=(
            "One scoop protein powder with milk (350ml). Based on typical products."
        ),
    ),
    "energy drink": StaticEntry(
        calories=110,
        protein=0,
        carbs=28,
        fat=0,
        explanation="8 oz energy drink (240ml). Based on typical energy drink data.",
    ),
    "beer": StaticEntry(
        calories=153,
        protein=2,
        carbs=13,
        fat=0,
        explanation="12 oz regular beer (355ml). Based on USDA data.",
    ),
    "wine": StaticEntry(
        calories=125,
        protein=0,
        carbs=4,
        fat=0,
        explanation="5 oz glass of red wine (148ml). Based on USDA data.",
    ),
    "latte": StaticEntry(
        calories=190,
        protein=10,
        carbs=18,
        fat=7,
        explanation="12 oz latte with whole milk (355ml). Based on coffee shop data.",
    ),
    "cappuccino": StaticEntry(
        calories=120,
        protein=6,
        carbs=10,
        fat=4,
        explanation=(
            "8 oz cappuccino with whole milk (240ml). Based on coffee shop data."
        ),
    ),
    "iced coffee": StaticEntry(
        calories=80,
        protein=4,
        carbs=15,
        fat=0,
        explanation=(
            "16 oz iced coffee with milk, no sugar (480ml). Based on coffee shop data."
        ),
    ),

    # More Protein Foods
    "tuna": StaticEntry(
        calories=132,
        protein=28,
        carbs=0,
        fat=1,
        explanation="100g canned tuna in water. Based on USDA standard reference.",
    ),
    "shrimp": StaticEntry(
        calories=99,
        protein=24,
        carbs=0,
        fat=1,
        explanation="100g cooked shrimp. Based on USDA standard reference.",
    ),
    "pork chop": StaticEntry(
        calories=231,
        protein=23,
        carbs=0,
        fat=15,
        explanation="100g cooked pork chop. Based on USDA standard reference.",
    ),
    "ground beef": StaticEntry(
        calories=250,
        protein=26,
        carbs=0,
        fat=15,
        explanation="100g cooked ground beef (80% lean). Based on USDA data.",
    ),
    "turkey breast": StaticEntry(
        calories=135,
        protein=30,
        carbs=0,
        fat=1,
        explanation="100g roasted turkey breast (skinless). Based on USDA data.",
    ),
    "ham": StaticEntry(
        calories=145,
        protein=21,
        carbs=1,
        fat=6,
        explanation="100g deli ham. Based on USDA standard reference.",
    ),
    "tofu": StaticEntry(
        calories=76,
        protein=8,
        carbs=2,
        fat=5,
        explanation="100g firm tofu. Based on USDA standard reference.",
    ),

    # More Carbs & Sides
    "potatoes": StaticEntry(
        calories=130,
        protein=3,
        carbs=30,
        fat=0,
        explanation="One medium baked potato (150g). Based on USDA data.",
    ),
    "mashed potatoes": StaticEntry(
        calories=210,
        protein=4,
        carbs=35,
        fat=7,
        explanation=(
            "1 cup mashed potatoes with butter and milk (210g). Based on USDA data."
        ),
    ),
    "sweet potato": StaticEntry(
        calories=112,
        protein=2,
        carbs=26,
        fat=0,
        explanation="One medium sweet potato (130g). Based on USDA data.",
    ),
    "quinoa": StaticEntry(
        calories=222,
        protein=8,
        carbs=39,
        fat=4,
        explanation="1 cup cooked quinoa (185g). Based on USDA data.",
    ),
    "couscous": StaticEntry(
        calories=176,
        protein=6,
        carbs=36,
        fat=0,
        explanation="1 cup cooked couscous (157g). Based on USDA data.",
    ),
    "beans": StaticEntry(
        calories=225,
        protein=15,
        carbs=40,
        fat=1,
        explanation="1 cup black beans (172g). Based on USDA data.",
    ),
    "mac and cheese": StaticEntry(
        calories=350,
        protein=14,
        carbs=40,
        fat=14,
        explanation="1 cup mac and cheese (200g). Based on typical prepared food data.",
    ),

    # More Vegetables
    "corn": StaticEntry(
        calories=132,
        protein=5,
        carbs=29,
        fat=2,
        explanation="1 cup corn kernels (154g). Based on USDA data.",
    ),
    "peas": StaticEntry(
        calories=134,
        protein=9,
        carbs=25,
        fat=0,
        explanation="1 cup green peas (160g). Based on USDA data.",
    ),
    "green beans": StaticEntry(
        calories=44,
        protein=2,
        carbs=10,
        fat=0,
        explanation="1 cup green beans (125g). Based on USDA data.",
    ),
    "spinach": StaticEntry(
        calories=7,
        protein=1,
        carbs=1,
        fat=0,
        explanation="1 cup raw spinach (30g). Based on USDA data.",
    ),
    "tomato": StaticEntry(
        calories=22,
        protein=1,
        carbs=5,
        fat=0,
        explanation="One medium tomato (123g). Based on USDA data.",
    ),
    "cucumber": StaticEntry(
        calories=16,
        protein=1,
        carbs=4,
        fat=0,
        explanation="1 cup sliced cucumber (119g). Based on USDA data.",
    ),
    "bell pepper": StaticEntry(
        calories=30,
        protein=1,
        carbs=7,
        fat=0,
        explanation="One medium bell pepper (119g). Based on USDA data.",
    ),
    "mushrooms": StaticEntry(
        calories=15,
        protein=2,
        carbs=2,
        fat=0,
        explanation="1 cup sliced mushrooms (70g). Based on USDA data.",
    ),
    "onion": StaticEntry(
        calories=44,
        protein=1,
        carbs=10,
        fat=0,
        explanation="One medium onion (110g). Based on USDA data.",
    ),

    # More Snacks & Desserts
    "pretzels": StaticEntry(
        calories=108,
        protein=3,
        carbs=23,
        fat=1,
        explanation="1 oz pretzels (28g). Based on USDA data.",
    ),
    "crackers": StaticEntry(
        calories=130,
        protein=2,
        carbs=21,
        fat=4,
        explanation="5 whole wheat crackers (28g). Based on USDA data.",
    ),
    "granola bar": StaticEntry(
        calories=140,
        protein=3,
        carbs=19,
        fat=6,
        explanation="One granola bar (30g). Based on typical product data.",
    ),
    "protein bar": StaticEntry(
        calories=200,
        protein=20,
        carbs=22,
        fat=7,
        explanation="One protein bar (60g). Based on typical product data.",
    ),
    "trail mix": StaticEntry(
        calories=173,
        protein=5,
        carbs=17,
        fat=11,
        explanation="1 oz trail mix (28g). Based on USDA data.",
    ),
    "peanut butter": StaticEntry(
        calories=188,
        protein=8,
        carbs=7,
        fat=16,
        explanation="2 tablespoons peanut butter (32g). Based on USDA data.",
    ),
    "hummus": StaticEntry(
        calories=70,
        protein=2,
        carbs=6,
        fat=5,
        explanation="2 tablespoons hummus (30g). Based on USDA data.",
    ),
    "brownie": StaticEntry(
        calories=227,
        protein=3,
        carbs=36,
        fat=9,
        explanation="One brownie (56g). Based on USDA data.",
    ),
    "cake": StaticEntry(
        calories=240,
        protein=3,
        carbs=35,
        fat=10,
        explanation="One slice of cake (74g). Based on USDA data.",
    ),
    "pie": StaticEntry(
        calories=296,
        protein=2,
        carbs=43,
        fat=14,
        explanation="One slice of apple pie (117g). Based on USDA data.",
    ),
    "pudding": StaticEntry(
        calories=140,
        protein=4,
        carbs=26,
        fat=3,
        explanation="1/2 cup chocolate pudding (130g). Based on typical product data.",
    ),

    # More Fruits
    "pear": StaticEntry(
        calories=96,
        protein=1,
        carbs=26,
        fat=0,
        explanation="One medium pear (166g). Based on USDA data.",
    ),
    "peach": StaticEntry(
        calories=59,
        protein=1,
        carbs=14,
        fat=0,
        explanation="One medium peach (150g). Based on USDA data.",
    ),
    "plum": StaticEntry(
        calories=30,
        protein=0,
        carbs=8,
        fat=0,
        explanation="One medium plum (66g). Based on USDA data.",
    ),
    "mango": StaticEntry(
        calories=99,
        protein=1,
        carbs=25,
        fat=1,
        explanation="1 cup sliced mango (165g). Based on USDA data.",
    ),
    "pineapple": StaticEntry(
        calories=82,
        protein=1,
        carbs=22,
        fat=0,
        explanation="1 cup diced pineapple (165g). Based on USDA data.",
    ),
    "blueberries": StaticEntry(
        calories=84,
        protein=1,
        carbs=21,
        fat=0,
        explanation="1 cup blueberries (148g). Based on USDA data.",
    ),
    "raspberries": StaticEntry(
        calories=64,
        protein=1,
        carbs=15,
        fat=1,
        explanation="1 cup raspberries (123g). Based on USDA data.",
    ),
    "blackberries": StaticEntry(
        calories=62,
        protein=2,
        carbs=14,
        fat=1,
        explanation="1 cup blackberries (144g). Based on USDA data.",
    ),
    "cherries": StaticEntry(
        calories=87,
        protein=1,
        carbs=22,
        fat=0,
        explanation="1 cup cherries (138g). Based on USDA data.",
    ),
    "kiwi": StaticEntry(
        calories=42,
        protein=1,
        carbs=10,
        fat=0,
        explanation="One medium kiwi (69g). Based on USDA data.",
    ),
}

STATIC_FOODS = MappingProxyType(_FOODS)
