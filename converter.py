from caffparser import export_caff, export_ciff, load_caff, load_ciff, output_path_for

INPUT_CIFF = "example.ciff"
INPUT_CAFF = "example.caff"


def ciff_to_jpg(ciff_path, jpg_path=None):
    image = load_ciff(ciff_path)
    jpg_path = jpg_path or output_path_for(ciff_path)
    export_ciff(image, jpg_path)
    print(
        f"Converted {ciff_path} ({image.width}x{image.height}, "
        f"{len(image.header.tags)} tags) to {jpg_path}"
    )
    return jpg_path


def caff_to_jpg(caff_path, jpg_path=None):
    container = load_caff(caff_path)
    jpg_path = jpg_path or output_path_for(caff_path)
    export_caff(container, jpg_path)
    creator = container.credits.creator if container.credits else "unknown"
    print(
        f"Converted first of {len(container.animations)} frames of {caff_path} "
        f"(by {creator}) to {jpg_path}"
    )
    return jpg_path


if __name__ == "__main__":
    # Example conversions
    ciff_to_jpg(INPUT_CIFF)
    caff_to_jpg(INPUT_CAFF)
