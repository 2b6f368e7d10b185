dim = 3
sides = ('up', 'down', 'front', 'back', 'left', 'right')
colors = ('white', 'yellow', 'red', 'orange', 'green', 'blue')
standard_colors = {
    'up': 'white',
    'down': 'yellow',
    'front': 'red',
    'back': 'orange',
    'left': 'green',
    'right': 'blue'
}
color_letters = {
    'white': 'W',
    'yellow': 'Y',
    'red': 'R',
    'orange': 'O',
    'green': 'G',
    'blue': 'B'
}
# Singmaster solver
reference_color = 'green'
max_iterations = 100
log_format = "%(asctime)s — %(funcName)s() — %(levelname)s — %(message)s"
