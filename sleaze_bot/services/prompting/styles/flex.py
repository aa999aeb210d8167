PROMPT_FLEX = (
    "Fisheye portrait of the [CHARACHTER] in oversized XL 1990s black urban "
    "fashion inspired by adidas street culture. Silver iced grillz, Rolex watch, "
    "and heavy iced-out chains reflecting in the flash. Leaning on the hood of a "
    "black 2009 Suzuki Jimny, driver-side headlight visible, while scrolling "
    "through a smartphone. Neon-lit Tokyo streets at night with wet asphalt "
    "reflections; cinematic hyperrealism with a surreal, otherworldly mood. Shot "
    "as if on a disposable Fujifilm camera with an 8mm fisheye lens; Portra 400 "
    "+ Cinestill 800 film look; heavy grain, dirty frame, dust, direct flash. "
    "Vogue fashion editorial aesthetic, gritty film photography style, dark "
    "cinematic tones, photo realism. Maintain the exact same facial features, "
    "hairstyle, skin tone, and overall appearance of [CHARACHTER], but add the "
    "urban fashion, accessories, and lighting effects."
)
